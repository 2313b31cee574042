"""
Seed data loading and caching.

This module loads a JSON seed file (catalog, programs, students) and builds
an InMemoryRecordStore from it.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_SEED_FILE
from ..exceptions import RecordStoreError
from .store import InMemoryRecordStore

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches a seed file.

    WHY LAZY LOADING: The seed is only read when first accessed, so creating
    a loader is free and a missing file is reported at the point of use.

    SEED FORMAT:
        {
            "catalog": [{"course_id", "subject", "title", "credits"}, ...],
            "programs": [
                {"code": "CS", "name": "Computer Science",
                 "requirements": [{"requirement_type", "course_code", "label", "sequence"}, ...]}
            ],
            "students": [
                {"id": "student-1",
                 "profile": {"freshman_semester", "graduation_semester", "major"},
                 "completions": [{"course_code", "semester_label"}, ...],
                 "schedule": [{"course_code", "semester_label"}, ...]}
            ]
        }

    Every top-level key is optional.

    Usage:
        loader = DataLoader("data/seed.json")
        store = loader.build_store()
    """

    def __init__(self, seed_path: Optional[Path] = None):
        self.seed_path = Path(seed_path) if seed_path else DEFAULT_SEED_FILE
        # Private cache - None means "not loaded yet"
        self._seed = None

    @property
    def seed(self) -> dict:
        if self._seed is None:
            if not self.seed_path.exists():
                raise RecordStoreError("load", f"seed file not found: {self.seed_path}")
            try:
                with open(self.seed_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except json.JSONDecodeError as exc:
                raise RecordStoreError("load", f"invalid JSON in {self.seed_path}: {exc}") from exc
            if not isinstance(data, dict):
                raise RecordStoreError("load", f"seed root must be an object: {self.seed_path}")
            self._seed = data
            logger.info("Loaded seed data from %s", self.seed_path)
        return self._seed

    def build_store(self) -> InMemoryRecordStore:
        """Create a fresh store populated from the seed."""
        store = InMemoryRecordStore()
        self.populate(store)
        return store

    def populate(self, store: InMemoryRecordStore) -> None:
        seed = self.seed

        for course in seed.get("catalog", []):
            if not course.get("course_id"):
                continue
            store.add_catalog_course(
                course["course_id"],
                subject=course.get("subject", ""),
                title=course.get("title", ""),
                credits=course.get("credits", 0.0),
            )

        for program in seed.get("programs", []):
            if not program.get("code"):
                continue
            store.add_program(
                program["code"],
                name=program.get("name", ""),
                requirements=program.get("requirements", []),
                program_id=program.get("id"),
            )

        for student in seed.get("students", []):
            student_id = student.get("id")
            if not student_id:
                continue
            profile = student.get("profile")
            if profile:
                store.set_profile(
                    student_id,
                    freshman_semester=profile.get("freshman_semester"),
                    graduation_semester=profile.get("graduation_semester"),
                    major=profile.get("major"),
                )
            for row in student.get("completions", []):
                if row.get("course_code"):
                    store.upsert_completion(student_id, row["course_code"], row.get("semester_label"))
            for row in student.get("schedule", []):
                if row.get("course_code") and row.get("semester_label"):
                    store.upsert_schedule(student_id, row["course_code"], row["semester_label"])

        logger.debug(
            "Seeded store: %d catalog courses, %d programs, %d students",
            len(seed.get("catalog", [])),
            len(seed.get("programs", [])),
            len(seed.get("students", [])),
        )
