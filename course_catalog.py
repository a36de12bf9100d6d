# course_catalog.py
# Loads the course catalog (department -> course -> section -> raw record) and serves read-only lookups.

import json
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from logging_config import get_logger

__all__ = ["CatalogError", "CourseCatalog", "RECORD_FIELDS"]

log = get_logger(__name__)

# Each raw section record stores one list entry per meeting slot under these keys.
RECORD_FIELDS = ("Activity", "Term", "Days", "StartTime", "EndTime")


class CatalogError(ValueError):
    # The catalog document does not have the expected shape.
    pass


class CourseCatalog:
    # Built once before any request is served and never mutated, so concurrent requests share it without locking.

    def __init__(self, departments: Mapping[str, Mapping[str, Mapping[str, Mapping[str, tuple]]]]):
        self._departments = departments
        self._courses = sorted(c for courses in departments.values() for c in courses)

    @classmethod
    def from_file(cls, path: str) -> "CourseCatalog":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        catalog = cls.from_dict(data)
        log.info("catalog_loaded", path=path, courses=len(catalog))
        return catalog

    @classmethod
    def from_dict(cls, data: Any) -> "CourseCatalog":
        if not isinstance(data, dict):
            raise CatalogError("catalog root must be an object keyed by department")

        departments: Dict[str, Mapping] = {}
        for dept, courses in data.items():
            if not isinstance(courses, dict):
                raise CatalogError(f"department {dept!r} must map course codes to sections")
            frozen_courses = {}
            for course, sections in courses.items():
                if not isinstance(sections, dict):
                    raise CatalogError(f"course {course!r} must map section names to records")
                frozen_courses[course] = MappingProxyType({
                    name: _freeze_record(course, name, record)
                    for name, record in sections.items()
                })
            departments[dept] = MappingProxyType(frozen_courses)
        return cls(MappingProxyType(departments))

    def lookup(self, department: str, course_code: str) -> Optional[Mapping[str, Mapping[str, tuple]]]:
        # Section name -> raw record for the course, or None when the catalog has no such course.
        return self._departments.get(department, {}).get(course_code)

    def valid_courses(self) -> List[str]:
        return list(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, course: object) -> bool:
        if not isinstance(course, str):
            return False
        return self.lookup(course.split(" ")[0], course) is not None


def _freeze_record(course: str, name: str, record: Any) -> Mapping[str, tuple]:
    # Validates the record's structure; time strings are left for the section filter to parse.
    if not isinstance(record, dict):
        raise CatalogError(f"{course} {name}: section record must be an object")

    frozen = {}
    for key in RECORD_FIELDS:
        if key not in record:
            raise CatalogError(f"{course} {name}: missing {key!r}")
        value = record[key]
        if not isinstance(value, list):
            raise CatalogError(f"{course} {name}: {key!r} must be a list")
        frozen[key] = tuple("" if v is None else str(v) for v in value)

    if len({len(v) for v in frozen.values()}) > 1:
        raise CatalogError(f"{course} {name}: meeting slot lists differ in length")
    return MappingProxyType(frozen)
