"""Tests for RegionAlert: one check feeding one fresh notification lifecycle."""

from __future__ import annotations

import asyncio

import pytest

from application.acquisition import GeolocationAcquirer
from application.boundary_check import BoundaryChecker
from application.enrichment import ContextEnricher
from application.region_alert import RegionAlert
from domain.location.errors import PermissionDeniedError
from domain.notification.value_objects import NotificationState, NotificationTimings
from tests.fakes import ScriptedGeocoder, ScriptedProvider


def make_alert(provider, host, scheduler=None, **kwargs) -> RegionAlert:
    checker = BoundaryChecker(
        GeolocationAcquirer(provider), ContextEnricher(ScriptedGeocoder())
    )
    return RegionAlert(checker, host, scheduler=scheduler, **kwargs)


def test_outside_run_shows_notification(london, host, scheduler):
    session = asyncio.run(make_alert(ScriptedProvider(london), host, scheduler).run())

    assert session.notified
    assert session.lifecycle.state is NotificationState.VISIBLE
    assert host.names() == ["show", "auto_hide_scheduled"]

    scheduler.advance(5.3)
    assert session.lifecycle.state is NotificationState.DISMISSED
    assert host.count("dismissed") == 1


def test_inside_run_shows_nothing(lagos, host, scheduler):
    session = asyncio.run(make_alert(ScriptedProvider(lagos), host, scheduler).run())
    assert session.result.is_in_region is True
    assert not session.notified
    assert host.events == []


def test_alerting_disabled(london, host, scheduler):
    alert = make_alert(ScriptedProvider(london), host, scheduler, alert_when_outside=False)
    session = asyncio.run(alert.run())
    assert session.result.is_in_region is False
    assert not session.notified


def test_undetermined_run_is_notified(host, scheduler):
    provider = ScriptedProvider(error=PermissionDeniedError())
    session = asyncio.run(make_alert(provider, host, scheduler).run())
    assert session.result.determined is False
    assert session.notified


def test_each_run_gets_a_fresh_lifecycle(london, host, scheduler):
    alert = make_alert(ScriptedProvider(london), host, scheduler)
    first = asyncio.run(alert.run())
    second = asyncio.run(alert.run())
    assert first.lifecycle is not second.lifecycle
    assert host.count("show") == 2


def test_cancelled_check_never_shows(london, host, scheduler):
    provider = ScriptedProvider(london, delay_s=5.0)

    async def scenario() -> None:
        task = asyncio.create_task(make_alert(provider, host, scheduler).run())
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert host.events == []


def test_run_until_settled_on_real_loop(london, host):
    timings = NotificationTimings(auto_hide_ms=10, exit_animation_ms=5)
    alert = make_alert(ScriptedProvider(london), host, timings=timings)

    session = asyncio.run(asyncio.wait_for(alert.run_until_settled(), timeout=2))

    assert session.lifecycle.state is NotificationState.DISMISSED
    assert host.names() == ["show", "auto_hide_scheduled", "dismissed"]
