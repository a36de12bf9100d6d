import pytest
import structlog

from app import create_app
from config import Settings
from course_catalog import CourseCatalog
from schedule_creator import ScheduleCreator


def slot(activity, term, days, start, end):
    return {
        "Activity": [activity],
        "Term": [term],
        "Days": [days],
        "StartTime": [start],
        "EndTime": [end],
    }


CATALOG = {
    "CPSC": {
        "CPSC 121": {
            "L1A": slot("Lecture", "1", "Mon", "09:00", "10:00"),
            "L1B": slot("Lecture", "1", "Mon", "11:00", "12:00"),
            "T1A": slot("Tutorial", "1", "Tue", "10:00", "11:00"),
            "B1A": slot("Laboratory", "1", "Wed", "14:00", "16:00"),
        },
        "CPSC 110": {
            "101": slot("Lecture", "1", "Mon Wed", "09:30", "10:30"),
            "102": slot("Lecture", "2", "Mon", "09:00", "10:00"),
            "W01": slot("Waiting List", "1", "", "", ""),
        },
    },
    "MATH": {
        # Each section overlaps both CPSC 121 lectures.
        "MATH 100": {
            "101": slot("Lecture", "1", "Mon", "08:30", "12:30"),
            "102": slot("Lecture", "1", "Mon", "09:00", "11:30"),
        },
        "MATH 200": {
            "201": slot("Lecture", "1", "Tue", "10:00", "11:00"),
        },
    },
    "PHYS": {
        "PHYS 101": {
            "101": slot("Lecture", "1", "Mon", "TBA", "TBA"),
            "102": slot("Seminar", "1", "Fri", "10:00", "11:00"),
        },
    },
}


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()


@pytest.fixture
def catalog():
    return CourseCatalog.from_dict(CATALOG)


@pytest.fixture
def creator(catalog):
    return ScheduleCreator(catalog)


@pytest.fixture
def client(catalog):
    app = create_app(settings=Settings(), catalog=catalog)
    app.config["TESTING"] = True
    return app.test_client()
