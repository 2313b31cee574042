"""
Tests: seed loading, row parsing and the in-memory store.

Run with:
    pytest tests/test_data.py -v
"""

import json

import pytest

from degreeplan import DataLoader, InMemoryRecordStore, RecordParser, RecordStoreError
from degreeplan.config import DEFAULT_SEED_FILE


class TestDataLoader:
    def test_builds_store_from_seed(self, tmp_path):
        seed = {
            "catalog": [{"course_id": "CS2011", "subject": "CS", "title": "Programming", "credits": 3}],
            "programs": [{"code": "CS", "name": "Computer Science", "requirements": [
                {"requirement_type": "course", "course_code": "CS 2011", "label": "Programming", "sequence": 1},
            ]}],
            "students": [{
                "id": "alice",
                "profile": {"freshman_semester": "Fall 2024", "graduation_semester": "Summer 2028", "major": "CS"},
                "completions": [{"course_code": "CS 2011", "semester_label": "Fall 2024"}],
                "schedule": [{"course_code": "CS 2028C", "semester_label": "Spring 2026"}],
            }],
        }
        path = tmp_path / "seed.json"
        path.write_text(json.dumps(seed))

        store = DataLoader(path).build_store()
        assert store.find_program_by_code("CS")["name"] == "Computer Science"
        assert len(store.list_catalog()) == 1
        assert store.get_profile("alice")["major"] == "CS"
        assert store.list_completions("alice") == [{"course_code": "CS 2011", "semester_label": "Fall 2024"}]
        assert len(store.list_schedule("alice")) == 1

    def test_seed_is_cached(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("{}")
        loader = DataLoader(path)
        first = loader.seed
        path.write_text('{"catalog": []}')
        assert loader.seed is first

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordStoreError):
            DataLoader(tmp_path / "nope.json").build_store()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("{not json")
        with pytest.raises(RecordStoreError):
            DataLoader(path).seed

    def test_non_object_root(self, tmp_path):
        path = tmp_path / "seed.json"
        path.write_text("[]")
        with pytest.raises(RecordStoreError):
            DataLoader(path).seed

    def test_bundled_seed_loads(self):
        store = DataLoader(DEFAULT_SEED_FILE).build_store()
        assert store.find_program_by_code("CS") is not None
        assert store.get_profile("student-1") is not None


class TestRecordParser:
    def setup_method(self):
        self.parser = RecordParser()

    def test_requirements(self):
        rows = [
            {"requirement_type": "course", "course_code": "CS 1", "label": "One", "sequence": "2"},
            {"requirement_type": "gen_ed", "course_code": None, "label": None, "sequence": 3},
            {"requirement_type": "", "course_code": "CS 2", "label": "Two"},
            "not a row",
        ]
        parsed = self.parser.parse_requirements(rows)
        assert [r.course_code for r in parsed] == ["CS 1", None, "CS 2"]
        assert parsed[0].sequence == 2
        assert parsed[1].is_gen_ed_slot
        assert parsed[2].requirement_type == "course"
        assert not parsed[2].is_gen_ed_slot

    def test_requirement_needs_something_to_match(self):
        parsed = self.parser.parse_requirements([
            {"course_code": None, "label": "   "},
            {"label": "General Education"},
        ])
        assert len(parsed) == 1
        assert parsed[0].is_gen_ed_slot

    def test_completions_allow_missing_semester(self):
        parsed = self.parser.parse_completions("alice", [
            {"course_code": "CS 1", "semester_label": None},
            {"course_code": "", "semester_label": "Fall 2024"},
        ])
        assert len(parsed) == 1
        assert parsed[0].semester_label is None

    def test_schedule_requires_semester(self):
        parsed = self.parser.parse_schedule("alice", [
            {"course_code": "CS 1", "semester_label": None},
            {"course_code": "CS 2", "semester_label": "Fall 2026"},
        ])
        assert [a.course_code for a in parsed] == ["CS 2"]

    def test_missing_profile_is_empty(self):
        profile = self.parser.parse_profile("alice", None)
        assert profile.student_id == "alice"
        assert not profile.has_planning_window

    def test_catalog_bad_credits(self):
        parsed = self.parser.parse_catalog([
            {"course_id": "CS1", "title": "One", "credits": "three"},
            {"title": "no id"},
        ])
        assert len(parsed) == 1
        assert parsed[0].credits == 0.0

    def test_program(self):
        assert self.parser.parse_program(None) is None
        program = self.parser.parse_program({"id": 7, "code": "CS", "name": "Computer Science"})
        assert program.program_id == "7"


class TestInMemoryRecordStore:
    def test_find_program_by_name_is_case_insensitive(self):
        store = InMemoryRecordStore()
        store.add_program("CS", "Computer Science")
        assert store.find_program_by_name("COMPUTER SCIENCE")["code"] == "CS"
        assert store.find_program_by_name("Biology") is None

    def test_find_program_by_code_is_exact(self):
        store = InMemoryRecordStore()
        store.add_program("CS", "Computer Science")
        assert store.find_program_by_code("cs") is None

    def test_returned_rows_are_copies(self):
        store = InMemoryRecordStore()
        store.upsert_completion("alice", "CS 1", "Fall 2024")
        store.list_completions("alice")[0]["semester_label"] = "Spring 2025"
        assert store.list_completions("alice")[0]["semester_label"] == "Fall 2024"

    def test_requirements_sorted_by_numeric_sequence(self):
        store = InMemoryRecordStore()
        store.add_program("CS", requirements=[
            {"course_code": "CS 3", "sequence": "10"},
            {"course_code": "CS 2", "sequence": 2},
            {"course_code": "CS 1", "sequence": None},
            {"course_code": "CS 0", "sequence": "first"},
        ], program_id="p1")
        rows = store.list_requirements("p1")
        assert [r["course_code"] for r in rows] == ["CS 1", "CS 0", "CS 2", "CS 3"]
