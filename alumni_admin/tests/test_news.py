"""Tests for the news feed."""

from datetime import datetime

from sqlalchemy.exc import OperationalError

from alumni_admin import accessors
from alumni_admin.news import NewsAggregator
from alumni_admin.tests.factories import achievement, event, job, profile


def test_feed_is_ordered_by_creation_time(database, add):
    alumni_id = add(profile())
    add(event(created_at=datetime(2024, 5, 2, 12, 0)))
    add(achievement(alumni_id, created_at=datetime(2024, 5, 1, 12, 0)))
    add(job(alumni_id, created_at=datetime(2024, 5, 3, 12, 0)))

    feed = NewsAggregator(database).build_feed()

    assert [item.title for item in feed] == ["Professional Update", "Upcoming Event", "Achievement"]


def test_feed_descriptions(database, add):
    alumni_id = add(profile(first_name="Asha", last_name="Rao"))
    add(event(title="Alumni Meetup", location="Main Auditorium", mode_of_event="offline",
              event_date_time=datetime(2025, 3, 14, 18, 0)))
    add(achievement(alumni_id, title="Best Paper Award", date_achieved=datetime(2024, 11, 5)))
    add(job(alumni_id, company_name="Globex", position="Senior Engineer", start_date=datetime(2021, 4, 12)))

    descriptions = {item.title: item.description for item in NewsAggregator(database).build_feed()}

    assert descriptions["Upcoming Event"] == (
        "A Alumni Meetup event is going to be held on March 14, 2025 at Main Auditorium. "
        "It is an offline event."
    )
    assert descriptions["Achievement"] == "Asha Rao achieved Best Paper Award on November 5, 2024."
    assert descriptions["Professional Update"] == (
        "Asha Rao got placed in Globex at the position of Senior Engineer in April 12, 2021."
    )


def test_feed_keeps_sort_date_and_subject_date_apart(database, add):
    add(event(created_at=datetime(2024, 1, 1), event_date_time=datetime(2025, 6, 1)))

    item = NewsAggregator(database).build_feed()[0]

    assert item.date.year == 2024
    assert item.subject_date.year == 2025


def test_failed_source_is_left_out(database, add, monkeypatch):
    alumni_id = add(profile())
    add(event(created_at=datetime(2024, 5, 1)))
    add(achievement(alumni_id, created_at=datetime(2024, 5, 2)))
    add(job(alumni_id, created_at=datetime(2024, 5, 3)))

    def broken(session, limit):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(accessors, "recent_achievements", broken)

    feed = NewsAggregator(database).build_feed()

    assert [item.title for item in feed] == ["Professional Update", "Upcoming Event"]


def test_items_without_profile_are_dropped(database, add, monkeypatch):
    kept = add(profile(first_name="Asha"))
    missing = add(profile(first_name="Gone"))
    add(achievement(kept, title="Kept"))
    add(achievement(missing, title="Dropped"))

    real_find_profile = accessors.find_profile

    def find_profile(session, alumni_id):
        if alumni_id == missing:
            return None
        return real_find_profile(session, alumni_id)

    monkeypatch.setattr(accessors, "find_profile", find_profile)

    feed = NewsAggregator(database).build_feed()

    assert [item.description.split(" achieved ")[1].split(" on ")[0] for item in feed] == ["Kept"]


def test_each_source_is_capped(database, add):
    for day in range(1, 13):
        add(event(title=f"Event {day}", created_at=datetime(2024, 1, day)))

    feed = NewsAggregator(database).build_feed()

    assert len(feed) == 10
    assert "Event 12" in feed[0].description
    assert all("Event 1 " not in item.description and "Event 2 " not in item.description for item in feed)


def test_empty_feed(database):
    assert NewsAggregator(database).build_feed() == []


def test_failed_profile_lookup_drops_only_that_item(database, add, monkeypatch, caplog):
    kept = add(profile(first_name="Asha"))
    unreachable = add(profile(first_name="Vikram"))
    add(achievement(kept, title="Kept", created_at=datetime(2024, 5, 1)))
    add(achievement(unreachable, title="Lost", created_at=datetime(2024, 5, 2)))

    real_find_profile = accessors.find_profile

    def find_profile(session, alumni_id):
        if alumni_id == unreachable:
            raise OperationalError("SELECT", {}, Exception("timeout"))
        return real_find_profile(session, alumni_id)

    monkeypatch.setattr(accessors, "find_profile", find_profile)

    feed = NewsAggregator(database).build_feed()

    assert [item.description for item in feed] == ["Asha Rao achieved Kept on November 5, 2024."]
    assert "Could not load alumni" in caplog.text
