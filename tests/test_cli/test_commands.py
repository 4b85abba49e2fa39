"""Tests for the rate limiter CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tokenbucket import cli
from tokenbucket.config.settings import LimiterSettings, Settings
from tokenbucket.core.limiter import new_limiter


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path: Path, monkeypatch):
    """Point the CLI at temp settings and keep it from attaching log handlers."""
    settings = Settings(
        project_root=tmp_path,
        limiter=LimiterSettings(capacity=5, refill_rate=0.001),
    )
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    return settings


class TestSimulate:
    def test_single_thread_totals(self, clock, hook):
        rl = new_limiter(4, 1, clock=clock, on_decision=hook)
        summary = cli.simulate(rl, "k", requests=10, threads=1)
        assert summary == {"key": "k", "requests": 10, "threads": 1, "admitted": 4, "denied": 6}

    def test_many_threads_admit_exactly_capacity(self, clock, hook):
        rl = new_limiter(7, 1, clock=clock, on_decision=hook)
        summary = cli.simulate(rl, "k", requests=50, threads=8)
        assert summary["admitted"] == 7
        assert summary["denied"] == 43
        assert len(hook.events) == 50

    def test_threads_capped_at_requests(self, clock, hook):
        rl = new_limiter(7, 1, clock=clock, on_decision=hook)
        summary = cli.simulate(rl, "k", requests=3, threads=10)
        assert summary["threads"] == 3
        assert summary["admitted"] == 3


class TestMain:
    def test_simulate_uses_settings(self, capsys):
        assert cli.main(["simulate", "alice", "--requests", "8"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["admitted"] == 5
        assert out["denied"] == 3

    def test_simulate_overrides(self, capsys):
        code = cli.main(["simulate", "alice", "--requests", "4", "--capacity", "2", "--threads", "2"])
        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out["admitted"] == 2

    def test_invalid_configuration_exit_code(self, capsys):
        assert cli.main(["simulate", "alice", "--capacity", "0"]) == 2
        assert capsys.readouterr().out == ""

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 1
        assert "simulate" in capsys.readouterr().out


class TestArgumentValidation:
    @pytest.mark.parametrize(
        "argv",
        [
            ["simulate", "k", "--requests", "-5"],
            ["simulate", "k", "--threads", "0"],
            ["simulate", "k", "--threads", "-2"],
            ["simulate", "k", "--requests", "many"],
        ],
    )
    def test_rejected_with_usage_error(self, argv, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(argv)
        assert exc_info.value.code == 2
        assert capsys.readouterr().out == ""

    def test_zero_requests_allowed(self, capsys):
        assert cli.main(["simulate", "k", "--requests", "0"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["admitted"] == 0
        assert out["denied"] == 0

    def test_simulate_rejects_negative_counts(self, clock, hook):
        rl = new_limiter(4, 1, clock=clock, on_decision=hook)
        with pytest.raises(ValueError):
            cli.simulate(rl, "k", requests=-1, threads=1)
        with pytest.raises(ValueError):
            cli.simulate(rl, "k", requests=5, threads=0)
        assert hook.events == []
