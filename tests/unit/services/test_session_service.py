"""Tests for session logging: validation, derived loads, recent listing."""

import datetime

import pytest

from loadtracker.core.clock import FixedClock
from loadtracker.core.errors import SessionValidationError
from loadtracker.db.kv_store import InMemoryKeyValueStore
from loadtracker.services.session_service import REQUIRED_FIELDS_MESSAGE, SessionService, describe_activity
from loadtracker.services.session_store import SessionStore

NOW = datetime.datetime(2026, 10, 19, 12, 0, tzinfo=datetime.timezone.utc)


def _track_form(**overrides) -> dict:
    form = {
        "date": "2026-10-18",
        "sessionType": "Technical",
        "event": "Shot Put",
        "implementWeight": "7.26",
        "totalThrows": "25",
        "duration": "120",
        "rpe": "6",
        "bestThrow": "15.2",
        "notes": "Good technique work",
    }
    form.update(overrides)
    return form


def _gym_form(**overrides) -> dict:
    form = {
        "date": "2026-10-17",
        "sessionType": "Strength",
        "exercise": "Back Squat",
        "sets": "4",
        "reps": "5",
        "weight": "120",
        "duration": "60",
        "rpe": "7",
        "notes": "",
    }
    form.update(overrides)
    return form


@pytest.fixture
def service():
    store = SessionStore(InMemoryKeyValueStore(), clock=FixedClock(NOW))
    return SessionService(store)


class TestLogTrack:
    def test_parses_form_values_and_derives_load(self, service):
        session = service.log_track(_track_form())
        assert session.type == "Track"
        assert session.duration == 120
        assert session.implement_weight == 7.26
        assert session.training_load == 720
        assert service.store.track_sessions == (session,)

    def test_blank_best_throw_defaults_to_zero(self, service):
        session = service.log_track(_track_form(bestThrow=""))
        assert session.best_throw == 0.0

    def test_missing_best_throw_and_notes(self, service):
        form = _track_form()
        del form["bestThrow"]
        del form["notes"]
        session = service.log_track(form)
        assert session.best_throw == 0.0
        assert session.notes == ""

    def test_accepts_snake_case_keys(self, service):
        form = _track_form()
        form["session_type"] = form.pop("sessionType")
        form["total_throws"] = form.pop("totalThrows")
        form["implement_weight"] = form.pop("implementWeight")
        assert service.log_track(form).total_throws == 25

    @pytest.mark.parametrize(
        "field, value",
        [
            ("event", ""),
            ("sessionType", "   "),
            ("totalThrows", "abc"),
            ("implementWeight", "0"),
            ("duration", ""),
            ("rpe", "11"),
            ("date", "not-a-date"),
        ],
    )
    def test_invalid_field_blocks_submission(self, service, field, value):
        with pytest.raises(SessionValidationError) as exc_info:
            service.log_track(_track_form(**{ field: value }))
        assert exc_info.value.message == REQUIRED_FIELDS_MESSAGE
        assert exc_info.value.errors
        assert service.store.is_empty()

    def test_missing_required_field_blocks_submission(self, service):
        form = _track_form()
        del form["rpe"]
        with pytest.raises(SessionValidationError):
            service.log_track(form)
        assert service.store.is_empty()


class TestLogGym:
    def test_derives_training_and_volume_load(self, service):
        session = service.log_gym(_gym_form())
        assert session.type == "Gym"
        assert session.training_load == 420
        assert session.volume_load == 2400
        assert service.store.gym_sessions == (session,)

    def test_missing_weight_blocks_submission(self, service):
        with pytest.raises(SessionValidationError):
            service.log_gym(_gym_form(weight=""))
        assert service.store.is_empty()

    def test_ids_never_collide(self, service):
        a = service.log_gym(_gym_form())
        b = service.log_gym(_gym_form())
        c = service.log_track(_track_form())
        assert len({a.id, b.id, c.id}) == 3


class TestRecent:
    def test_sorted_newest_first_with_limit(self, service):
        service.log_track(_track_form(date="2026-10-10"))
        service.log_gym(_gym_form(date="2026-10-18"))
        service.log_track(_track_form(date="2026-10-14"))

        rows = service.recent()
        assert [r.date.isoformat() for r in rows] == ["2026-10-18", "2026-10-14", "2026-10-10"]
        assert len(service.recent(limit=2)) == 2

    def test_activity_descriptions(self, service):
        track = service.log_track(_track_form())
        gym = service.log_gym(_gym_form())
        assert describe_activity(track) == "Shot Put (25 throws)"
        assert describe_activity(gym) == "Back Squat (4x5@120kg)"

    def test_fractional_weight_description(self, service):
        gym = service.log_gym(_gym_form(weight="82.5"))
        assert describe_activity(gym) == "Back Squat (4x5@82.5kg)"
