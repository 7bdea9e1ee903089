"""
Sample sessions for a fresh install.

Three throwing and three strength sessions spread over the last five
days, so the dashboard has something to show on first start.  Seeding
only happens when the store is empty.
"""

import datetime
import logging

from loadtracker.schemas.session import GymSessionCreate, TrackSessionCreate
from loadtracker.services.session_service import SessionService

logger = logging.getLogger(__name__)

# (days ago, fields)
SAMPLE_TRACK = [
    (5, dict(session_type="Technical", event="Shot Put", implement_weight=7.26, total_throws=25, duration=120,
             rpe=6, best_throw=15.2, notes="Good technique work")),
    (3, dict(session_type="Competition Prep", event="Shot Put", implement_weight=7.26, total_throws=18, duration=90,
             rpe=8, best_throw=16.1, notes="Preparing for meet")),
    (1, dict(session_type="Volume", event="Discus", implement_weight=2.0, total_throws=35, duration=105, rpe=7,
             best_throw=42.5, notes="Volume session")),
]

SAMPLE_GYM = [
    (4, dict(session_type="Strength", exercise="Back Squat", sets=4, reps=5, weight=120, duration=60, rpe=7,
             notes="Good strength session")),
    (2, dict(session_type="Power", exercise="Clean", sets=5, reps=3, weight=85, duration=45, rpe=8,
             notes="Power development")),
    (0, dict(session_type="Special Strength", exercise="Overhead Press", sets=3, reps=8, weight=75, duration=50,
             rpe=6, notes="Upper body strength")),
]


def seed_sample_sessions(service: SessionService) -> int:
    """Add the sample sessions if the store is empty.  Returns how many were added."""
    store = service.store
    if not store.is_empty():
        return 0

    today = store.clock.now().date()
    for days_ago, fields in SAMPLE_TRACK:
        service.create_track(TrackSessionCreate(date=today - datetime.timedelta(days=days_ago), **fields))
    for days_ago, fields in SAMPLE_GYM:
        service.create_gym(GymSessionCreate(date=today - datetime.timedelta(days=days_ago), **fields))

    added = len(SAMPLE_TRACK) + len(SAMPLE_GYM)
    logger.info("Seeded %d sample sessions", added)
    return added
