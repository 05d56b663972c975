"""Tests for the headless scenario runner."""

from toastqueue.config.config_manager import AppConfig
from toastqueue.headless_runner import HeadlessRunner, ScenarioStep


def test_default_scenario_leaves_only_persistent(capsys):
    runner = HeadlessRunner()
    remaining = runner.run()
    assert [n.message for n in remaining] == ["Saved"]
    assert len(runner.queue.scheduler) == 0

    out = capsys.readouterr().out
    assert "'Failed'" in out
    assert "1 live: Saved" in out


def test_history_tracks_snapshots():
    runner = HeadlessRunner(quiet=True)
    runner.run([
        ScenarioStep(0, "enqueue", "error", "Failed", 3000),
        ScenarioStep(2999, "enqueue", "info", "Still here?", None),
    ], settle_ms=1)

    (t0, first), (t1, second), (t2, last) = runner.history
    assert (t0, [n.message for n in first]) == (0, ["Failed"])
    assert (t1, [n.message for n in second]) == (2999, ["Failed", "Still here?"])
    assert (t2, [n.message for n in last]) == (3000, ["Still here?"])


def test_dismiss_of_expired_toast_is_reported(capsys):
    runner = HeadlessRunner()
    runner.run([
        ScenarioStep(0, "enqueue", "info", "Brief", 100),
        ScenarioStep(200, "dismiss", target=0),
    ], settle_ms=0)
    assert "was already gone" in capsys.readouterr().out


def test_policy_from_config():
    config = AppConfig()
    config.toasts.max_visible = 1
    runner = HeadlessRunner(config, quiet=True)
    remaining = runner.run([
        ScenarioStep(0, "enqueue", "info", "first", None),
        ScenarioStep(0, "enqueue", "info", "second", None),
    ], settle_ms=0)
    assert [n.message for n in remaining] == ["second"]
