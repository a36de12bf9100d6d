# models.py
# Read-only views of the course catalog that the schedule engine works with.

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

__all__ = [
    "ActivityType",
    "LECTURE_TYPES",
    "LAB_TYPES",
    "TUTORIAL_TYPES",
    "FULL_RANGE_TERM",
    "ClassSession",
    "CourseSection",
    "Schedule",
    "ScheduleSelectOptions",
    "parse_clock",
    "format_clock",
    "normalize_course",
]

FULL_RANGE_TERM = "1-2"


class ActivityType(Enum):
    LECTURE = "Lecture"
    SEMINAR = "Seminar"
    STUDIO = "Studio"
    LABORATORY = "Laboratory"
    TUTORIAL = "Tutorial"

    @classmethod
    def parse(cls, text: Any) -> Optional["ActivityType"]:
        # Catalog activity strings outside the enumeration (e.g. "Waiting List") map to None.
        try:
            return cls(str(text).strip())
        except ValueError:
            return None

    @property
    def component(self) -> str:
        # Lecture-like formats are interchangeable choices for the same course slot.
        if self in LECTURE_TYPES:
            return "lecture"
        return self.value.lower()


LECTURE_TYPES = frozenset({ActivityType.LECTURE, ActivityType.SEMINAR, ActivityType.STUDIO})
LAB_TYPES = frozenset({ActivityType.LABORATORY})
TUTORIAL_TYPES = frozenset({ActivityType.TUTORIAL})


def parse_clock(text: Any) -> Optional[int]:
    # "HH:MM" -> minutes since midnight, None when the value is not a clock time.
    try:
        t = datetime.strptime(str(text).strip(), "%H:%M")
    except ValueError:
        return None
    return t.hour * 60 + t.minute


def format_clock(minutes: Optional[int]) -> Optional[str]:
    if minutes is None:
        return None
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def normalize_course(course: str) -> str:
    # " cpsc   121 " -> "CPSC 121"
    return " ".join(str(course).upper().split())


@dataclass(frozen=True)
class ClassSession:
    # One weekly meeting of a section. start/end are minutes since midnight, None when the catalog time was unusable.
    activity: ActivityType
    term: str
    day: str
    start: Optional[int]
    end: Optional[int]

    @property
    def is_timed(self) -> bool:
        # Untimed sessions are kept for display but never take part in conflict checks.
        return self.start is not None and self.end is not None and self.start < self.end

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activity": self.activity.value,
            "term": self.term,
            "day": self.day,
            "start": format_clock(self.start),
            "end": format_clock(self.end),
        }


@dataclass(frozen=True)
class CourseSection:
    course: str
    name: str
    activity: ActivityType
    sessions: Tuple[ClassSession, ...] = ()

    @property
    def key(self) -> Tuple[str, str]:
        # A schedule holds at most one section per key.
        return (self.course, self.activity.component)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "course": self.course,
            "name": self.name,
            "activity": self.activity.value,
            "sessions": [s.to_dict() for s in self.sessions],
        }


@dataclass(frozen=True)
class Schedule:
    sections: Tuple[CourseSection, ...] = field(default_factory=tuple)

    def with_section(self, section: CourseSection) -> "Schedule":
        return Schedule(self.sections + (section,))

    def to_dict(self) -> Dict[str, Any]:
        return {"sections": [s.to_dict() for s in self.sections]}


@dataclass(frozen=True)
class ScheduleSelectOptions:
    term: str = FULL_RANGE_TERM
    select_labs_and_tutorials: bool = False

    @property
    def filters_term(self) -> bool:
        # The full-range token (or no token) admits sections from every term.
        return bool(self.term) and self.term != FULL_RANGE_TERM
