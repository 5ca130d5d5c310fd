import json

import pytest

from portfolio_analyzer import main as main_module
from portfolio_analyzer.analyzer.models import AnalysisReport, Viewport
from portfolio_analyzer.exceptions import NavigationError, TargetUnreachableError


@pytest.mark.asyncio
async def test_unreachable_target_exits_with_error(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    async def unreachable(config):
        raise TargetUnreachableError(config.url, "Connection refused")

    monkeypatch.setattr(main_module, "analyze", unreachable)

    assert await main_module.main([]) == 1
    assert not (tmp_path / "ui-analysis-report.json").exists()


@pytest.mark.asyncio
async def test_report_is_written_on_success(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    seen = {}

    async def analyzed(config):
        seen["config"] = config
        return AnalysisReport(
            timestamp="2024-01-01T00:00:00+00:00",
            viewport=Viewport(width=1920, height=1080),
            url=config.url,
        )

    monkeypatch.setattr(main_module, "analyze", analyzed)

    assert await main_module.main([]) == 0
    assert seen["config"].url == "http://localhost:5174/portfolio/"
    assert seen["config"].screenshots_dir == "screenshots"
    data = json.loads((tmp_path / "ui-analysis-report.json").read_text(encoding="utf-8"))
    assert data["issues"] == []
    assert data["suggestions"] == []


def test_navigation_error_message():
    error = NavigationError("http://localhost:5174/portfolio/", "HTTP 404")

    assert str(error) == "Could not load http://localhost:5174/portfolio/: HTTP 404"
    assert error.reason == "HTTP 404"
