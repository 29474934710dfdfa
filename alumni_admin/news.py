"""News feed built from recent events, achievements and job updates.

Three sources are read independently, each in its own session:

- the latest events, announced as "Upcoming Event"
- the latest achievements, credited to their alumni
- the latest professional history entries, as "Professional Update"

Items are merged and ordered by when the underlying row was created, newest
first. A source that fails to load is logged and left out; an item whose
alumni profile cannot be found is dropped on its own.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import accessors
from .db import Database, DatabaseError
from .models import Event, AlumniProfile, Achievement, ProfessionalInformation
from .utils.timezone import ensure_utc, format_long_date

logger = logging.getLogger(__name__)

NEWS_SOURCE_LIMIT = 10

UPCOMING_EVENT = "Upcoming Event"
ACHIEVEMENT = "Achievement"
PROFESSIONAL_UPDATE = "Professional Update"

@dataclass
class FeedItem:
    """
    One entry of the news feed.

    Fields:
        title: Fixed label of the source
        description: Generated sentence
        date: Creation time of the source row, used for ordering
        subject_date: Date the sentence talks about (event day, date achieved, start date)
    """
    title: str
    description: str
    date: datetime
    subject_date: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'description': self.description,
            'date': self.date,
            'subject_date': self.subject_date,
        }

def describe_event(event: Event) -> str:
    return (
        f"A {event.title} event is going to be held on {format_long_date(event.event_date_time)} "
        f"at {event.location}. It is an {event.mode_of_event} event."
    )

def event_item(event: Event) -> FeedItem:
    return FeedItem(
        title=UPCOMING_EVENT,
        description=describe_event(event),
        date=ensure_utc(event.created_at),
        subject_date=ensure_utc(event.event_date_time),
    )

def lookup_profile(session: Session, alumni_id: int) -> Optional[AlumniProfile]:
    """
    Resolve the alumni behind a feed item, or None if that is not possible.

    A failed lookup only costs its own item. It runs in a savepoint so the
    rest of the source can still be read from the same transaction.
    """
    try:
        with session.begin_nested():
            return accessors.find_profile(session, alumni_id)
    except SQLAlchemyError as e:
        logger.warning(f"Could not load alumni {alumni_id} for news feed: {e}")
        return None

def achievement_item(session: Session, achievement: Achievement) -> Optional[FeedItem]:
    alumni = lookup_profile(session, achievement.alumni_id)
    if alumni is None:
        return None
    return FeedItem(
        title=ACHIEVEMENT,
        description=(
            f"{alumni.first_name} {alumni.last_name} achieved {achievement.title} "
            f"on {format_long_date(achievement.date_achieved)}."
        ),
        date=ensure_utc(achievement.created_at),
        subject_date=ensure_utc(achievement.date_achieved),
    )

def professional_item(session: Session, info: ProfessionalInformation) -> Optional[FeedItem]:
    alumni = lookup_profile(session, info.alumni_id)
    if alumni is None:
        return None
    return FeedItem(
        title=PROFESSIONAL_UPDATE,
        description=(
            f"{alumni.first_name} {alumni.last_name} got placed in {info.company_name} "
            f"at the position of {info.position} in {format_long_date(info.start_date)}."
        ),
        date=ensure_utc(info.created_at),
        subject_date=ensure_utc(info.start_date),
    )

class NewsAggregator:
    """Builds the news feed against one database."""

    def __init__(self, database: Database, limit: int = NEWS_SOURCE_LIMIT):
        self.database = database
        self.limit = limit

    def _event_items(self, session: Session) -> List[Optional[FeedItem]]:
        return [event_item(event) for event in accessors.recent_events(session, self.limit)]

    def _achievement_items(self, session: Session) -> List[Optional[FeedItem]]:
        return [
            achievement_item(session, achievement)
            for achievement in accessors.recent_achievements(session, self.limit)
        ]

    def _professional_items(self, session: Session) -> List[Optional[FeedItem]]:
        return [
            professional_item(session, info)
            for info in accessors.recent_professional_information(session, self.limit)
        ]

    def _collect(self, source: str, build: Callable[[Session], List[Optional[FeedItem]]]) -> List[FeedItem]:
        try:
            with self.database.session() as session:
                items = build(session)
        except DatabaseError as e:
            logger.warning(f"Skipping {source} in news feed: {e}")
            return []

        found = [item for item in items if item is not None]
        if len(found) < len(items):
            logger.debug(f"Dropped {len(items) - len(found)} {source} without a resolvable alumni profile")
        return found

    def build_feed(self) -> List[FeedItem]:
        """Merge all sources, newest first."""
        items: List[FeedItem] = []
        items.extend(self._collect("events", self._event_items))
        items.extend(self._collect("achievements", self._achievement_items))
        items.extend(self._collect("professional updates", self._professional_items))

        items.sort(key=lambda item: item.date, reverse=True)
        return items
