"""Tests for registering, updating and removing attendance."""

from datetime import datetime, timezone

import pytest
from sqlalchemy import func, select

from alumni_admin import attendance
from alumni_admin.db import SessionError
from alumni_admin.errors import NotFoundError
from alumni_admin.models import AlumniAttending, Event
from alumni_admin.schemas import NetworkingCreate, NetworkingUpdate
from alumni_admin.tests.factories import attending, event, profile


def _count(database, model):
    with database.session() as session:
        return session.scalar(select(func.count()).select_from(model))


def _create_payload(alumni_id, **overrides):
    fields = dict(
        alumni_id=alumni_id, position="Panelist", title="Career Fair",
        description="Meet recruiters", event_type="fair", mode_of_event="offline",
        location="Hall A", event_date_time=datetime(2025, 5, 1, 10, 0),
    )
    fields.update(overrides)
    return NetworkingCreate(**fields)


def test_register_creates_linked_event_and_attendance(database, add):
    alumni_id = add(profile())

    with database.session() as session:
        created, attendee = attendance.register(session, _create_payload(alumni_id))
        event_id = created.event_id
        assert attendee.event_id == event_id

    assert _count(database, Event) == 1
    assert _count(database, AlumniAttending) == 1
    with database.session() as session:
        row = session.scalars(select(AlumniAttending)).one()
        assert row.alumni_id == alumni_id
        assert row.event_id == event_id
        assert row.position == "Panelist"


def test_register_rolls_back_event_when_attendance_fails(database):
    # No profile 404 exists, so the attendance insert violates its foreign key
    with pytest.raises(SessionError):
        with database.session() as session:
            attendance.register(session, _create_payload(404))

    assert _count(database, Event) == 0
    assert _count(database, AlumniAttending) == 0


def test_upsert_keeps_fields_that_were_not_supplied(database, add):
    alumni_id = add(profile())
    event_id = add(event(title="Alumni Meetup", location="Main Auditorium"))
    add(attending(event_id, alumni_id, position="Speaker"))

    payload = NetworkingUpdate(alumni_id=alumni_id, title="", location="Hall B")
    with database.session() as session:
        attendance.upsert_by_event(session, event_id, payload)

    with database.session() as session:
        stored = session.get(Event, event_id)
        assert stored.title == "Alumni Meetup"
        assert stored.location == "Hall B"
        assert stored.mode_of_event == "offline"
        row = session.scalars(select(AlumniAttending)).one()
        assert row.position == "Speaker"


def test_upsert_overwrites_event_date(database, add):
    alumni_id = add(profile())
    event_id = add(event())

    payload = NetworkingUpdate(alumni_id=alumni_id, event_date_time=datetime(2026, 1, 2, 9, 30))
    with database.session() as session:
        attendance.upsert_by_event(session, event_id, payload)

    with database.session() as session:
        assert session.get(Event, event_id).event_date_time == datetime(2026, 1, 2, 9, 30, tzinfo=timezone.utc)


def test_upsert_creates_then_updates_single_attendance_row(database, add):
    alumni_id = add(profile())
    event_id = add(event())

    with database.session() as session:
        attendance.upsert_by_event(session, event_id, NetworkingUpdate(alumni_id=alumni_id, position="Guest"))
    with database.session() as session:
        attendance.upsert_by_event(session, event_id, NetworkingUpdate(alumni_id=alumni_id, position="Host"))

    with database.session() as session:
        rows = session.scalars(
            select(AlumniAttending).where(
                AlumniAttending.event_id == event_id,
                AlumniAttending.alumni_id == alumni_id,
            )
        ).all()
    assert len(rows) == 1
    assert rows[0].position == "Host"


def test_upsert_missing_event_is_not_found(database, add):
    alumni_id = add(profile())

    with pytest.raises(NotFoundError):
        with database.session() as session:
            attendance.upsert_by_event(session, 12345, NetworkingUpdate(alumni_id=alumni_id, title="x"))

    assert _count(database, AlumniAttending) == 0


def test_delete_removes_attendance_but_not_event(database, add):
    alumni_id = add(profile())
    event_id = add(event())
    add(attending(event_id, alumni_id))

    with database.session() as session:
        attendance.delete(session, alumni_id=alumni_id, event_id=event_id)

    assert _count(database, AlumniAttending) == 0
    assert _count(database, Event) == 1


def test_delete_unknown_pair_is_not_found(database, add):
    event_id = add(event())

    with pytest.raises(NotFoundError):
        with database.session() as session:
            attendance.delete(session, alumni_id=999, event_id=event_id)


def test_only_empty_strings_count_as_not_supplied():
    payload = NetworkingUpdate(alumni_id=1, title="", location="  ", position="")

    assert payload.supplied_event_fields() == {'location': "  "}
    assert payload.position is None


def test_whitespace_location_overwrites_stored_value(database, add):
    alumni_id = add(profile())
    event_id = add(event(location="Main Auditorium"))

    with database.session() as session:
        attendance.upsert_by_event(session, event_id, NetworkingUpdate(alumni_id=alumni_id, location=" "))

    with database.session() as session:
        assert session.get(Event, event_id).location == " "
