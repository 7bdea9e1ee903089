"""Tests for trailing windows, week windows and session membership."""

import datetime

from loadtracker.metrics.windows import (
    Window,
    group_by_week,
    session_instant,
    sessions_in,
    trailing_window,
    week_window,
)
from loadtracker.schemas.session import TrackSession

UTC = datetime.timezone.utc
NOW = datetime.datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
MIDNIGHT = datetime.datetime(2026, 10, 19, 0, 0, tzinfo=UTC)


def _track(day: datetime.date, session_id: int = 1, load: float = 100.0) -> TrackSession:
    return TrackSession(id=session_id, date=day, session_type="Technical", event="Shot Put",
                        implement_weight=7.26, total_throws=10, duration=int(load), rpe=1, training_load=load)


def _days_before(instant: datetime.datetime, days: int) -> datetime.date:
    return (instant - datetime.timedelta(days=days)).date()


class TestWindows:
    def test_trailing_window(self):
        w = trailing_window(NOW, 28)
        assert w.start == NOW - datetime.timedelta(days=28)
        assert w.end == NOW

    def test_current_week_window(self):
        w = week_window(NOW, 0)
        assert w == Window(NOW - datetime.timedelta(days=7), NOW)

    def test_previous_week_window(self):
        w = week_window(NOW, 1)
        assert w.start == NOW - datetime.timedelta(days=14)
        assert w.end == NOW - datetime.timedelta(days=7)

    def test_naive_now_is_treated_as_utc(self):
        naive = datetime.datetime(2026, 10, 19, 12, 0)
        assert trailing_window(naive, 7) == trailing_window(NOW, 7)

    def test_eight_weeks_tile_the_last_56_days(self):
        windows = [week_window(NOW, k) for k in range(8)]
        assert windows[0].end == NOW
        assert windows[-1].start == NOW - datetime.timedelta(days=56)
        for newer, older in zip(windows, windows[1:]):
            assert older.end == newer.start
        for i, a in enumerate(windows):
            for b in windows[i + 1:]:
                assert a.start >= b.end or b.start >= a.end


class TestMembership:
    def test_session_instant_is_midnight_utc(self):
        s = _track(datetime.date(2026, 10, 18))
        assert session_instant(s) == datetime.datetime(2026, 10, 18, tzinfo=UTC)

    def test_half_open_excludes_end(self):
        w = trailing_window(MIDNIGHT, 7)
        today = _track(MIDNIGHT.date())
        assert not w.contains(session_instant(today))
        assert w.contains(session_instant(today), inclusive=True)

    def test_start_is_included(self):
        w = trailing_window(MIDNIGHT, 7)
        first_day = _track(_days_before(MIDNIGHT, 7))
        assert sessions_in([first_day], w) == [first_day]

    def test_sessions_in_keeps_input_order(self):
        sessions = [_track(_days_before(NOW, d), session_id=d) for d in (3, 1, 10, 2)]
        inside = sessions_in(sessions, trailing_window(NOW, 7))
        assert [s.id for s in inside] == [3, 1, 2]


class TestGroupByWeek:
    def test_sessions_fall_into_their_week(self):
        sessions = [_track(_days_before(NOW, d), session_id=d) for d in (1, 8, 9, 20, 60)]
        grouped = list(group_by_week(sessions, NOW, 4))

        assert [weeks_ago for weeks_ago, _, _ in grouped] == [0, 1, 2, 3]
        assert [[s.id for s in in_week] for _, _, in_week in grouped] == [[1], [8, 9], [20], []]

    def test_each_session_counted_once(self):
        sessions = [_track(_days_before(NOW, d), session_id=d) for d in range(56)]
        grouped = list(group_by_week(sessions, NOW, 8))
        ids = [s.id for _, _, in_week in grouped for s in in_week]
        assert len(ids) == 56
        assert len(set(ids)) == 56
