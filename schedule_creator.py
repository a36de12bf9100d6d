# schedule_creator.py
# Builds every conflict-free schedule for a list of courses, one course at a time, pruning clashes as it goes.

from typing import AbstractSet, Iterable, List, Optional

from course_catalog import CourseCatalog
from logging_config import get_logger
from models import (
    LAB_TYPES,
    LECTURE_TYPES,
    TUTORIAL_TYPES,
    ActivityType,
    ClassSession,
    CourseSection,
    Schedule,
    ScheduleSelectOptions,
    normalize_course,
    parse_clock,
)

__all__ = [
    "ScheduleCreator",
    "add_sections",
    "unresolvable_pairs",
    "sessions_conflict",
    "sections_conflict",
    "schedule_conflict",
]

log = get_logger(__name__)


class ScheduleCreator:
    # Generates schedules against a read-only catalog; no per-request state, so one instance serves every request.

    def __init__(self, catalog: CourseCatalog):
        self.catalog = catalog

    def create(self, courses: Iterable[str], options: Optional[ScheduleSelectOptions] = None) -> List[Schedule]:
        # Return all non-conflicting schedules for the requested courses; unknown courses are skipped.
        options = options or ScheduleSelectOptions()
        courses = list(courses)

        passes = [LECTURE_TYPES]
        if options.select_labs_and_tutorials:
            passes += [LAB_TYPES, TUTORIAL_TYPES]

        schedules: Optional[List[Schedule]] = None  # None until the first course contributes sections.
        seen = set()
        for course in courses:
            if not self.course_exists(course):
                log.info("unknown_course", course=course)
                continue
            if normalize_course(course) in seen:
                continue
            seen.add(normalize_course(course))

            for activity_types in passes:
                sections = self.create_sections(course, activity_types, options)
                if not sections:
                    log.debug(
                        "no_candidate_sections",
                        course=normalize_course(course),
                        activities=sorted(a.value for a in activity_types),
                        term=options.term,
                    )
                    continue
                schedules = add_sections(schedules, sections)

        result = schedules or []
        log.info("schedules_created", courses=len(courses), term=options.term, schedules=len(result))
        return result

    def course_exists(self, course: str) -> bool:
        return normalize_course(course) in self.catalog

    def create_sections(
        self,
        course: str,
        activity_types: AbstractSet[ActivityType],
        options: Optional[ScheduleSelectOptions] = None,
    ) -> List[CourseSection]:
        # Materialize the course's sections of the wanted activity types, in catalog order.
        options = options or ScheduleSelectOptions()
        course = normalize_course(course)
        if not course:
            return []
        records = self.catalog.lookup(course.split(" ")[0], course)
        if records is None:
            return []

        sections: List[CourseSection] = []
        for name, record in records.items():
            if not record["Activity"]:
                continue
            activity = ActivityType.parse(record["Activity"][0])
            if activity not in activity_types:
                continue
            if options.filters_term and any(t != options.term for t in record["Term"]):
                continue

            sessions: List[ClassSession] = []
            for i, day_str in enumerate(record["Days"]):
                start = parse_clock(record["StartTime"][i])
                end = parse_clock(record["EndTime"][i])
                if start is None or end is None or start >= end:
                    # Missing or inverted meeting times; these sessions stay out of conflict checks.
                    log.warning(
                        "malformed_time",
                        course=course,
                        section=name,
                        start=record["StartTime"][i],
                        end=record["EndTime"][i],
                    )
                    start = end = None
                # "Mon Wed Fri" becomes three sessions.
                for day in day_str.split():
                    sessions.append(ClassSession(
                        activity=ActivityType.parse(record["Activity"][i]) or activity,
                        term=record["Term"][i],
                        day=day,
                        start=start,
                        end=end,
                    ))

            sections.append(CourseSection(course=course, name=name, activity=activity, sessions=tuple(sessions)))
        return sections


def unresolvable_pairs(
    creator: ScheduleCreator,
    courses: Iterable[str],
    options: Optional[ScheduleSelectOptions] = None,
) -> List[List[str]]:
    # Pairs of courses that each schedule on their own but never together, under the same options as create().
    options = options or ScheduleSelectOptions()
    relevant: List[str] = []
    for course in courses:
        name = normalize_course(course)
        if name in relevant or not creator.course_exists(name):
            continue
        if creator.create([name], options):
            relevant.append(name)

    bad_pairs: List[List[str]] = []
    for i in range(len(relevant)):
        for j in range(i + 1, len(relevant)):
            if not creator.create([relevant[i], relevant[j]], options):
                bad_pairs.append([relevant[i], relevant[j]])
    return bad_pairs


def add_sections(schedules: Optional[List[Schedule]], sections: List[CourseSection]) -> List[Schedule]:
    # One fold step: extend every partial schedule with every candidate section that fits.
    if schedules is None:
        return [Schedule((section,)) for section in sections]

    extended: List[Schedule] = []
    for schedule in schedules:
        for section in sections:
            candidate = schedule.with_section(section)
            if schedule_conflict(candidate):
                continue
            extended.append(candidate)
    return extended


def sessions_conflict(a: ClassSession, b: ClassSession) -> bool:
    # Same term and day, and the half-open intervals [start, end) intersect.
    if not (a.is_timed and b.is_timed):
        return False
    return a.term == b.term and a.day == b.day and (_overlaps(a, b) or _overlaps(b, a))


def _overlaps(a: ClassSession, b: ClassSession) -> bool:
    # b starts or ends inside a; checking both orders also catches one session containing the other.
    return (a.start <= b.start < a.end) or (a.start < b.end <= a.end)


def sections_conflict(s1: CourseSection, s2: CourseSection) -> bool:
    for a in s1.sessions:
        for b in s2.sessions:
            if sessions_conflict(a, b):
                return True
    return False


def schedule_conflict(schedule: Schedule) -> bool:
    # Sections sharing a key are alternatives for the same slot, so they are never compared.
    sections = schedule.sections
    for i in range(len(sections)):
        for j in range(i + 1, len(sections)):
            a, b = sections[i], sections[j]
            if a.key != b.key and sections_conflict(a, b):
                return True
    return False
