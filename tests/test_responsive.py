import asyncio

import pytest

from portfolio_analyzer.analyzer.models import IssueCategory, IssueLevel, Viewport
from portfolio_analyzer.analyzer.responsive import ViewportOverride, audit_responsive

from conftest import FakeProbeSource, make_probe


CONTAINER = ".minimal-content"
CHILDREN = ".social-link, .action-item"
ORIGINAL = Viewport(width=1920, height=1080)


def centered_layout(overflow_at=None, overflow_by=10):
    """Container centered with 20px gutters, overflowing at one width."""
    def layout(viewport):
        width = min(viewport.width - 40, 1200)
        x = (viewport.width - width) / 2
        if viewport.width == overflow_at:
            x = viewport.width - width + overflow_by
        return {CONTAINER: [make_probe("minimal-content-0", x=x, width=width, height=600)]}
    return layout


@pytest.mark.asyncio
async def test_fitting_layout_has_no_issues():
    source = FakeProbeSource(layout=centered_layout(), viewport=ORIGINAL)

    issues = await audit_responsive(source, CONTAINER)

    assert issues == []


@pytest.mark.asyncio
async def test_overflow_at_one_breakpoint_yields_one_issue():
    source = FakeProbeSource(layout=centered_layout(overflow_at=768), viewport=ORIGINAL)

    issues = await audit_responsive(source, CONTAINER)

    assert len(issues) == 1
    issue = issues[0]
    assert issue.category is IssueCategory.RESPONSIVE
    assert issue.level is IssueLevel.WARNING
    assert issue.element == "minimal-content-0"
    assert issue.description == "Content overflowing at 768px"
    assert issue.details["breakpoint"] == 768
    assert issue.details["right"] == 778


@pytest.mark.asyncio
async def test_negative_left_edge_is_overflow():
    def layout(viewport):
        return {CONTAINER: [make_probe("minimal-content-0", x=-5, width=100)]}
    source = FakeProbeSource(layout=layout, viewport=ORIGINAL)

    issues = await audit_responsive(source, CONTAINER, breakpoints=(320, 768))

    assert [issue.details["breakpoint"] for issue in issues] == [320, 768]


@pytest.mark.asyncio
async def test_breakpoints_are_visited_in_order_and_viewport_restored():
    source = FakeProbeSource(layout=centered_layout(), viewport=ORIGINAL)

    await audit_responsive(source, CONTAINER)

    widths = [viewport.width for viewport in source.viewport_history]
    assert widths == [320, 768, 1024, 1440, 1920, 1920]
    assert all(viewport.height == 1080 for viewport in source.viewport_history)
    assert source.viewport == ORIGINAL


@pytest.mark.asyncio
async def test_viewport_restored_when_measurement_fails():
    source = FakeProbeSource(
        layout=centered_layout(),
        viewport=Viewport(width=1280, height=800),
        fail_at_width=1024,
    )

    with pytest.raises(RuntimeError):
        await audit_responsive(source, CONTAINER)

    assert source.viewport == Viewport(width=1280, height=800)


@pytest.mark.asyncio
async def test_children_checked_against_width_and_height():
    def layout(viewport):
        return {
            CONTAINER: [make_probe("minimal-content-0", x=0, width=viewport.width - 20)],
            CHILDREN: [
                make_probe("social-link-0", x=10, y=100, width=44, height=44, interactive=True),
                make_probe("action-item-0", x=10, y=1070, width=200, height=48, interactive=True),
            ],
        }
    source = FakeProbeSource(layout=layout, viewport=ORIGINAL)

    issues = await audit_responsive(source, CONTAINER, breakpoints=(320,), child_selector=CHILDREN)

    assert [issue.element for issue in issues] == ["action-item-0"]
    assert issues[0].description == "Element overflowing viewport at 320px"
    assert issues[0].details["bottom"] == 1118


@pytest.mark.asyncio
async def test_unsettled_layout_is_reported_as_uncertain():
    source = FakeProbeSource(
        layout=centered_layout(overflow_at=320),
        viewport=ORIGINAL,
        settle_delay=0.5,
    )

    issues = await audit_responsive(
        source, CONTAINER, breakpoints=(320, 768), settle_timeout=0.01
    )

    assert [issue.level for issue in issues] == [IssueLevel.INFO, IssueLevel.INFO]
    assert issues[0].description == "Measurement uncertain at 320px"
    assert issues[1].description == "Measurement uncertain at 768px"
    assert source.viewport == ORIGINAL


@pytest.mark.parametrize("breakpoints", [
    (768, 320),
    (320, 320, 768),
    (320, 1024, 768),
])
@pytest.mark.asyncio
async def test_breakpoints_must_be_strictly_ascending(breakpoints):
    source = FakeProbeSource(layout=centered_layout(), viewport=ORIGINAL)

    with pytest.raises(ValueError):
        await audit_responsive(source, CONTAINER, breakpoints=breakpoints)

    assert source.viewport_history == []


@pytest.mark.asyncio
async def test_empty_breakpoints_only_restore():
    source = FakeProbeSource(layout=centered_layout(), viewport=ORIGINAL)

    assert await audit_responsive(source, CONTAINER, breakpoints=()) == []
    assert source.viewport_history == [ORIGINAL]


@pytest.mark.asyncio
async def test_cancel_event_stops_between_breakpoints():
    cancel = asyncio.Event()

    class CancellingSource(FakeProbeSource):
        async def wait_for_layout(self):
            if self.viewport.width == 768:
                cancel.set()

    source = CancellingSource(layout=centered_layout(), viewport=ORIGINAL)

    await audit_responsive(source, CONTAINER, cancel_event=cancel)

    assert [viewport.width for viewport in source.viewport_history] == [320, 768, 1920]
    assert source.viewport == ORIGINAL


@pytest.mark.asyncio
async def test_viewport_override_restores_on_task_cancellation():
    started = asyncio.Event()
    source = FakeProbeSource(viewport=ORIGINAL)

    async def hold():
        async with ViewportOverride(source) as override:
            await override.resize(320)
            started.set()
            await asyncio.sleep(10)

    task = asyncio.ensure_future(hold())
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert source.viewport == ORIGINAL
