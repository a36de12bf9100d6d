from models import ActivityType, ClassSession, CourseSection, Schedule
from schedule_creator import schedule_conflict, sections_conflict, sessions_conflict


def session(day="Mon", start=540, end=600, term="1", activity=ActivityType.LECTURE):
    return ClassSession(activity=activity, term=term, day=day, start=start, end=end)


def section(course, name, *sessions, activity=ActivityType.LECTURE):
    return CourseSection(course=course, name=name, activity=activity, sessions=tuple(sessions))


def test_overlapping_sessions_conflict():
    assert sessions_conflict(session(start=540, end=600), session(start=570, end=630))
    assert sessions_conflict(session(start=570, end=630), session(start=540, end=600))


def test_identical_sessions_conflict():
    assert sessions_conflict(session(), session())


def test_contained_session_conflicts_in_both_orders():
    outer = session(start=510, end=750)
    inner = session(start=540, end=600)
    assert sessions_conflict(outer, inner)
    assert sessions_conflict(inner, outer)


def test_different_terms_do_not_conflict():
    assert not sessions_conflict(session(term="1"), session(term="2"))


def test_full_year_term_only_matches_its_own_token():
    assert not sessions_conflict(session(term="1-2"), session(term="1"))


def test_different_days_do_not_conflict():
    assert not sessions_conflict(session(day="Mon"), session(day="Tue"))


def test_touching_sessions_do_not_conflict():
    # 10:00-11:00 and 11:00-12:00
    assert not sessions_conflict(session(start=600, end=660), session(start=660, end=720))
    assert not sessions_conflict(session(start=660, end=720), session(start=600, end=660))


def test_untimed_sessions_never_conflict():
    assert not sessions_conflict(session(start=None, end=None), session())
    assert not sessions_conflict(session(), session(start=540, end=None))


def test_sections_conflict_when_any_session_pair_does():
    a = section("CPSC 121", "L1A", session(day="Mon"), session(day="Wed"))
    b = section("MATH 100", "101", session(day="Tue"), session(day="Wed", start=590, end=650))
    c = section("MATH 100", "102", session(day="Fri"))
    assert sections_conflict(a, b)
    assert not sections_conflict(a, c)


def test_schedule_conflict_ignores_sections_with_the_same_key():
    a = section("CPSC 121", "L1A", session())
    b = section("CPSC 121", "L1B", session())
    assert not schedule_conflict(Schedule((a, b)))


def test_schedule_conflict_compares_lecture_and_lab_of_one_course():
    lecture = section("CPSC 121", "L1A", session())
    lab = section("CPSC 121", "B1A", session(activity=ActivityType.LABORATORY), activity=ActivityType.LABORATORY)
    assert schedule_conflict(Schedule((lecture, lab)))


def test_schedule_conflict_across_courses():
    a = section("CPSC 121", "L1A", session())
    b = section("MATH 100", "101", session(day="Tue"))
    c = section("PHYS 101", "101", session(start=595, end=700))
    assert not schedule_conflict(Schedule((a, b)))
    assert schedule_conflict(Schedule((a, b, c)))


def test_empty_schedule_has_no_conflict():
    assert not schedule_conflict(Schedule())
