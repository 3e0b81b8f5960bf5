"""Unit tests for teamops.triggers.detector - alert conditions."""

from datetime import timedelta

from teamops.config import Settings
from teamops.priority.models import TaskStatus
from teamops.triggers.detector import (
    collect_alerts,
    detect_blocked_tasks,
    detect_overdue_tasks,
    detect_stalled_tasks,
    filter_recent_alerts,
)
from teamops.triggers.models import Alert, AlertType, SentNotification
from tests.conftest import NOW, days_from_now


class TestDetectOverdue:
    def test_overdue_owned_task(self, make_task):
        task = make_task(id="t1", title="Invoice", owner_id="m1", internal_deadline=days_from_now(-3.5))
        alerts = detect_overdue_tasks([task], NOW)
        assert len(alerts) == 1
        assert alerts[0].type == AlertType.TASK_OVERDUE
        assert alerts[0].member_id == "m1"
        assert alerts[0].task_id == "t1"
        assert "3 day(s)" in alerts[0].message
        assert '"Invoice"' in alerts[0].message

    def test_skips_done_unowned_and_future(self, make_task):
        tasks = [
            make_task(owner_id="m1", status=TaskStatus.DONE, internal_deadline=days_from_now(-1)),
            make_task(owner_id=None, internal_deadline=days_from_now(-1)),
            make_task(owner_id="m1", internal_deadline=days_from_now(1)),
            make_task(owner_id="m1"),
        ]
        assert detect_overdue_tasks(tasks, NOW) == []


class TestDetectStalled:
    def test_stale_checkin(self, make_task):
        task = make_task(owner_id="m1", status=TaskStatus.IN_PROGRESS, last_checkin_at=NOW - timedelta(hours=50))
        alerts = detect_stalled_tasks([task], NOW, stall_hours=48)
        assert [a.type for a in alerts] == [AlertType.PROGRESS_STALL]

    def test_recent_checkin(self, make_task):
        task = make_task(owner_id="m1", status=TaskStatus.IN_PROGRESS, last_checkin_at=NOW - timedelta(hours=10))
        assert detect_stalled_tasks([task], NOW) == []

    def test_falls_back_to_updated_at(self, make_task):
        task = make_task(owner_id="m1", status=TaskStatus.IN_PROGRESS, updated_at=NOW - timedelta(days=3))
        assert len(detect_stalled_tasks([task], NOW)) == 1

    def test_only_in_progress(self, make_task):
        task = make_task(owner_id="m1", status=TaskStatus.NOT_STARTED, updated_at=NOW - timedelta(days=3))
        assert detect_stalled_tasks([task], NOW) == []


class TestDetectBlocked:
    def test_single_summary_for_manager(self, make_task):
        tasks = [
            make_task(title="A", owner_id="m1", status=TaskStatus.BLOCKED, updated_at=NOW - timedelta(hours=30)),
            make_task(title="B", owner_id="m2", status=TaskStatus.BLOCKED, updated_at=NOW - timedelta(days=4)),
            make_task(title="C", owner_id="m3", status=TaskStatus.BLOCKED, updated_at=NOW - timedelta(hours=2)),
        ]
        alerts = detect_blocked_tasks(tasks, NOW, manager_id="boss")
        assert len(alerts) == 1
        assert alerts[0].member_id == "boss"
        assert alerts[0].message.startswith("2 blocked task(s)")
        assert '"C"' not in alerts[0].message

    def test_blocked_without_update_time_skipped(self, make_task):
        tasks = [
            make_task(title="Unknown", owner_id="m1", status=TaskStatus.BLOCKED, updated_at=None),
            make_task(title="Stale", owner_id="m2", status=TaskStatus.BLOCKED, updated_at=NOW - timedelta(days=2)),
        ]
        alerts = detect_blocked_tasks(tasks, NOW, manager_id="boss")
        assert len(alerts) == 1
        assert alerts[0].message.startswith("1 blocked task(s)")
        assert '"Unknown"' not in alerts[0].message

    def test_only_untimed_blocked_tasks(self, make_task):
        task = make_task(status=TaskStatus.BLOCKED, updated_at=None)
        assert detect_blocked_tasks([task], NOW, manager_id="boss") == []

    def test_no_manager(self, make_task):
        task = make_task(status=TaskStatus.BLOCKED, updated_at=NOW - timedelta(days=4))
        assert detect_blocked_tasks([task], NOW, manager_id=None) == []


class TestFilterRecentAlerts:
    def _alert(self, member_id="m1", type=AlertType.TASK_OVERDUE):
        return Alert(type=type, member_id=member_id, message="x")

    def test_suppresses_recent_same_type(self):
        recent = [SentNotification(member_id="m1", type=AlertType.TASK_OVERDUE, created_at=NOW - timedelta(hours=3))]
        kept = filter_recent_alerts([self._alert(), self._alert("m2")], recent, NOW, window_hours=12)
        assert [a.member_id for a in kept] == ["m2"]

    def test_old_notifications_ignored(self):
        recent = [SentNotification(member_id="m1", type=AlertType.TASK_OVERDUE, created_at=NOW - timedelta(hours=13))]
        assert len(filter_recent_alerts([self._alert()], recent, NOW, window_hours=12)) == 1

    def test_other_types_not_suppressed(self):
        recent = [SentNotification(member_id="m1", type=AlertType.PROGRESS_STALL, created_at=NOW)]
        assert len(filter_recent_alerts([self._alert()], recent, NOW)) == 1

    def test_first_per_member_and_type_within_batch(self):
        kept = filter_recent_alerts([self._alert(), self._alert(), self._alert("m2")], [], NOW)
        assert [a.member_id for a in kept] == ["m1", "m2"]


class TestCollectAlerts:
    def test_runs_all_detectors(self, make_task):
        tasks = [
            make_task(id="o", owner_id="m1", internal_deadline=days_from_now(-1)),
            make_task(id="s", owner_id="m2", status=TaskStatus.IN_PROGRESS, last_checkin_at=NOW - timedelta(hours=5)),
            make_task(id="b", owner_id="m3", status=TaskStatus.BLOCKED, updated_at=NOW - timedelta(hours=5)),
        ]
        settings = Settings(stall_hours=4, blocked_alert_hours=4, alert_dedup_hours=12)
        alerts = collect_alerts(tasks, NOW, manager_id="boss", settings=settings)
        assert [a.type for a in alerts] == [
            AlertType.TASK_OVERDUE,
            AlertType.PROGRESS_STALL,
            AlertType.BLOCKED_ALERT,
        ]

    def test_applies_dedup(self, make_task):
        tasks = [make_task(owner_id="m1", internal_deadline=days_from_now(-1))]
        recent = [SentNotification(member_id="m1", type=AlertType.TASK_OVERDUE, created_at=NOW - timedelta(hours=1))]
        assert collect_alerts(tasks, NOW, recent=recent, settings=Settings()) == []
