"""Tests for the analytics report runner."""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from services.analytics_report import analytics_report
from shared.clients.analytics.google.AnalyticsClientGoogle import AnalyticsClientGoogle


@pytest.fixture
def runner_env(monkeypatch, tmp_path, analytics_env):
    monkeypatch.setenv("ROOT_DIR", str(tmp_path))
    monkeypatch.setenv("ANALYTICS_REPORT_PARAMETERS", json.dumps({"apiVersion": "dataAPI", "propertyId": "1"}))


@pytest.fixture
def calls(monkeypatch):
    """Replace the client's network methods and record the order they are awaited in."""
    recorder = MagicMock()
    recorder.boot = AsyncMock()
    recorder.do_healthcheck = AsyncMock()
    recorder.do_get_report = AsyncMock(return_value=[{"rowCount": 0, "rows": []}])
    recorder.close = AsyncMock()
    for name in ("boot", "do_healthcheck", "do_get_report", "close"):
        monkeypatch.setattr(AnalyticsClientGoogle, name, getattr(recorder, name))
    return recorder


class TestAnalyticsReportRunner:

    @pytest.mark.asyncio
    async def test_healthcheck_runs_after_boot(self, runner_env, calls, capsys):
        await analytics_report.main()

        assert [name for name, _, _ in calls.mock_calls] == ["boot", "do_healthcheck", "do_get_report", "close"]
        assert json.loads(capsys.readouterr().out) == [{"rowCount": 0, "rows": []}]

    @pytest.mark.asyncio
    async def test_failed_healthcheck_skips_report_and_closes(self, runner_env, calls, capsys):
        calls.do_healthcheck.side_effect = httpx.ConnectError("unreachable")

        await analytics_report.main()

        calls.do_get_report.assert_not_awaited()
        calls.close.assert_awaited_once()
        assert capsys.readouterr().out == ""
