import asyncio

import pytest

from clockgrid.display import ClockDisplay
from clockgrid.scheduler import Scheduler


def test_frame_interval(display):
    assert Scheduler(display, frame_rate=60).frame_interval == pytest.approx(1 / 60)
    assert Scheduler(display, frame_rate=0).frame_interval == 1.0


def test_tick_without_animation_does_not_redraw(display):
    redraws = []
    display.update_immediate("123456")
    scheduler = Scheduler(display, on_redraw=lambda: redraws.append(1))

    assert scheduler.tick(1.0) is False
    assert redraws == []
    assert scheduler.frame_count == 1


def test_tick_advances_animating_clocks(display):
    redraws = []
    display.update_immediate("000000")
    display.update("111111", now=0.0)
    scheduler = Scheduler(display, on_redraw=lambda: redraws.append(1))

    assert scheduler.tick(0.15) is True
    assert display.is_animating()

    # Past the 300 ms duration everything settles
    assert scheduler.tick(0.5) is True
    assert not display.is_animating()
    assert scheduler.tick(0.6) is False

    assert len(redraws) == 2


def test_attach_switches_display(display, colors):
    scheduler = Scheduler(display)
    other = ClockDisplay(colors=colors)
    other.update_immediate("000000")
    other.update("999999", now=0.0)

    scheduler.attach(other)
    scheduler.tick(1.0)

    assert scheduler.display is other
    assert not other.is_animating()


@pytest.mark.asyncio
async def test_run_settles_animation(colors):
    display = ClockDisplay(colors=colors, animation_duration_ms=0)
    display.update_immediate("000000")
    display.update("888888")

    scheduler = Scheduler(display, frame_rate=100)
    task = asyncio.create_task(scheduler.run())
    await asyncio.sleep(0.05)

    assert scheduler.is_running
    assert scheduler.frame_count > 0
    assert not display.is_animating()

    scheduler.stop()
    await asyncio.wait_for(task, timeout=1.0)
    assert not scheduler.is_running


@pytest.mark.asyncio
async def test_run_cancellation(display):
    scheduler = Scheduler(display, frame_rate=100)
    task = asyncio.create_task(scheduler.run())
    await asyncio.sleep(0.02)

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert not scheduler.is_running
