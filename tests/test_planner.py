"""
Tests: DegreePlanner end-to-end over an in-memory store.

Run with:
    pytest tests/test_planner.py -v
"""

import pytest

from degreeplan import DegreePlanner, InMemoryRecordStore, Ledger, RecordStoreError


@pytest.fixture
def planner(store, today):
    return DegreePlanner(store, today)


class TestSetup:
    def test_configured_profile(self, planner):
        assert not planner.needs_setup("alice")

    def test_unknown_student_needs_setup(self, planner):
        assert planner.needs_setup("nobody")
        assert planner.planning_grid("nobody") == []
        assert planner.planning_semesters("nobody") == []


class TestPlanning:
    def test_semesters_cover_window(self, planner):
        semesters = planner.planning_semesters("alice")
        assert semesters[0] == "Fall 2024"
        assert semesters[-1] == "Summer 2028"
        assert len(semesters) == 12

    def test_add_then_grid(self, planner):
        assert planner.add_course_to_semester("alice", "CS 2011", "Spring 2025") is Ledger.COMPLETIONS
        assert planner.add_course_to_semester("alice", "CS 2028C", "Spring 2026") is Ledger.SCHEDULE

        years = planner.planning_grid("alice")
        assert [y.label for y in years] == ["Freshman", "Sophomore", "Pre-junior", "Junior"]
        cells = {cell.label: cell for year in years for cell in year.semesters}
        assert [r.course_code for r in cells["Spring 2025"].taken] == ["CS 2011"]
        assert [a.course_code for a in cells["Spring 2026"].scheduled] == ["CS 2028C"]

    def test_remove_from_schedule(self, planner):
        planner.add_course_to_semester("alice", "CS 2028C", "Spring 2026")
        assert planner.remove_from_schedule("alice", "CS 2028C")
        assert planner.store.list_schedule("alice") == []

    def test_search_catalog(self, planner):
        assert [c.course_id for c in planner.search_catalog("data")] == ["CS2028C"]
        assert [c.course_id for c in planner.search_catalog("math")] == ["MATH1061"]
        assert planner.search_catalog("   ") == []


class TestAuditAndProgress:
    def test_audit_uses_profile_major(self, planner):
        planner.add_course_to_semester("alice", "cs 2011", "Spring 2025")
        summary = planner.audit_summary("alice")
        assert summary.program_code == "CS"
        assert summary.completed_count == 1
        assert summary.total_requirements == 5

    def test_scheduled_courses_do_not_count_as_completed(self, planner):
        planner.add_course_to_semester("alice", "CS 2011", "Spring 2026")
        assert planner.audit_summary("alice").completed_count == 0

    def test_unknown_major_is_empty(self, store, today):
        store.set_profile("bob", "Fall 2024", "Summer 2028", "Astrology")
        summary = DegreePlanner(store, today).audit_summary("bob")
        assert summary.total_requirements == 0
        assert not summary.has_requirements

    def test_progress(self, planner):
        planner.add_course_to_semester("alice", "MATH 1061", "Fall 2024")
        planner.add_course_to_semester("alice", "CS 2011", "Spring 2026")
        stats = planner.progress("alice")
        assert stats.academic_year_label == "2025-26"
        assert stats.completion_rate == 20
        assert stats.credits_earned == 4
        assert stats.year_credits == 0
        assert stats.upcoming_courses == 1

    def test_store_failure_is_distinguishable(self, today):
        class BrokenStore(InMemoryRecordStore):
            def find_program_by_code(self, code):
                raise RecordStoreError("find_program_by_code", "unreachable")

        with pytest.raises(RecordStoreError):
            DegreePlanner(BrokenStore(), today).audit_summary("alice", "CS")
