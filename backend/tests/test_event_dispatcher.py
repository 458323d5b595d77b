import logging

from domain.events import DomainEvent, StudentCreatedEvent, StudentGPAUpdatedEvent
from services.event_dispatcher import EventDispatcher, create_default_dispatcher


def created(student_id="s-1"):
    return StudentCreatedEvent(student_id=student_id, full_name="Jane Doe", email="jane@university.edu")


def test_handlers_receive_matching_events_only():
    dispatcher = EventDispatcher()
    seen = []
    dispatcher.register(StudentCreatedEvent, lambda e: seen.append(("created", e.student_id)))
    dispatcher.register(StudentGPAUpdatedEvent, lambda e: seen.append(("gpa", e.student_id)))

    dispatcher.dispatch([created("s-1"), StudentGPAUpdatedEvent(student_id="s-2", new_gpa=3.0, previous_gpa=None)])

    assert seen == [("created", "s-1"), ("gpa", "s-2")]


def test_base_event_handlers_see_everything():
    dispatcher = EventDispatcher()
    seen = []
    dispatcher.register(DomainEvent, lambda e: seen.append(e.event_type))

    delivered = dispatcher.dispatch([created(), StudentGPAUpdatedEvent(student_id="s-1", new_gpa=2.0, previous_gpa=3.0)])

    assert delivered == 2
    assert seen == ["StudentCreatedEvent", "StudentGPAUpdatedEvent"]


def test_failing_handler_is_skipped(caplog):
    dispatcher = EventDispatcher()
    seen = []

    def broken(event):
        raise RuntimeError("mailer offline")

    dispatcher.register(StudentCreatedEvent, broken)
    dispatcher.register(StudentCreatedEvent, seen.append)

    with caplog.at_level(logging.ERROR, logger="services.event_dispatcher"):
        delivered = dispatcher.dispatch([created()])

    assert delivered == 1
    assert len(seen) == 1
    assert "mailer offline" in caplog.text


def test_default_dispatcher_logs_student_creation(caplog):
    dispatcher = create_default_dispatcher()

    with caplog.at_level(logging.INFO, logger="services.event_dispatcher"):
        delivered = dispatcher.dispatch([created("s-42")])

    # log_event plus on_student_created
    assert delivered == 2
    assert "Student created: Jane Doe" in caplog.text
