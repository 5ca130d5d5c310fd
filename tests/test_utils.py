import logging

import pytest

from portfolio_analyzer.exceptions import NavigationError, TargetUnreachableError
from portfolio_analyzer.utils.log import get_logger
from portfolio_analyzer.utils.paths import ensure_parent_dir, sanitize_filename
from portfolio_analyzer.utils.reachability import check_reachable


def test_sanitize_filename():
    assert sanitize_filename("hero-dark-mode") == "hero-dark-mode"
    assert sanitize_filename("https://www.example.com/a b?c") == "example.com_a_b_c"
    assert len(sanitize_filename("x" * 300)) == 100


def test_ensure_parent_dir(tmp_path):
    target = tmp_path / "reports" / "nested" / "report.json"

    ensure_parent_dir(str(target))

    assert target.parent.is_dir()


def test_child_loggers_share_package_namespace():
    assert get_logger().name == "portfolio_analyzer"
    assert get_logger("contrast").name == "portfolio_analyzer.contrast"
    assert isinstance(get_logger("contrast"), logging.Logger)


@pytest.mark.asyncio
async def test_closed_port_is_unreachable():
    # Nothing listens on the discard port locally
    with pytest.raises(TargetUnreachableError) as excinfo:
        await check_reachable("http://127.0.0.1:9/portfolio/", timeout=5)

    assert isinstance(excinfo.value, NavigationError)
    assert excinfo.value.url == "http://127.0.0.1:9/portfolio/"
