#!/usr/bin/env python3
"""Fill the development database with a small demo data set."""

import sys
import logging
from datetime import datetime, timedelta
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from alumni_admin.db import Database, DatabaseConfig
from alumni_admin.models import (
    AlumniProfile,
    Achievement,
    ProfessionalInformation,
    Event,
    AlumniAttending,
)
from alumni_admin.utils.timezone import now_utc

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def seed(database: Database) -> None:
    now = now_utc()
    with database.session() as session:
        asha = AlumniProfile(
            first_name="Asha", last_name="Rao", branch="Computer Engineering",
            batch_year=2018, email="asha.rao@example.com", mobile_no="5550100",
        )
        vikram = AlumniProfile(
            first_name="Vikram", last_name="Shah", branch="Mechanical Engineering",
            batch_year=2016, email="vikram.shah@example.com", mobile_no="5550101",
        )
        session.add_all([asha, vikram])
        session.flush()

        session.add_all([
            ProfessionalInformation(
                alumni_id=asha.alumni_id, company_name="Initech", position="Engineer",
                start_date=datetime(2018, 7, 1), end_date=datetime(2021, 3, 31),
                created_at=now - timedelta(days=30),
            ),
            ProfessionalInformation(
                alumni_id=asha.alumni_id, company_name="Globex", position="Senior Engineer",
                start_date=datetime(2021, 4, 12), end_date=None,
                created_at=now - timedelta(days=2),
            ),
            Achievement(
                alumni_id=vikram.alumni_id, title="Best Paper Award",
                description="Awarded at the national design conference",
                date_achieved=datetime(2024, 11, 5), created_at=now - timedelta(days=5),
            ),
        ])

        meetup = Event(
            title="Alumni Meetup", description="Annual networking evening",
            event_type="networking", mode_of_event="offline", location="Main Auditorium",
            event_date_time=now + timedelta(days=21), created_at=now - timedelta(days=1),
        )
        session.add(meetup)
        session.flush()
        session.add(AlumniAttending(event_id=meetup.event_id, alumni_id=asha.alumni_id, position="Speaker"))

    logger.info("Demo data inserted")

if __name__ == "__main__":
    database = Database(DatabaseConfig())
    try:
        database.init_db()
        seed(database)
    finally:
        database.close()
