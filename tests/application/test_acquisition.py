"""Tests for GeolocationAcquirer failure normalisation and deadlines."""

from __future__ import annotations

import asyncio

import pytest

from application.acquisition import GeolocationAcquirer
from domain.location.errors import (
    AcquisitionFailureCause,
    AcquisitionTimeoutError,
    GeolocationUnsupportedError,
    PermissionDeniedError,
    PositionUnavailableError,
)
from domain.location.value_objects import PositionOptions
from tests.fakes import ScriptedProvider


def test_returns_provider_coordinate(lagos):
    provider = ScriptedProvider(coordinate=lagos)
    assert asyncio.run(GeolocationAcquirer(provider).acquire()) == lagos


def test_passes_options_to_provider(lagos):
    provider = ScriptedProvider(coordinate=lagos)
    options = PositionOptions(timeout_ms=2_000, maximum_age_ms=0)
    asyncio.run(GeolocationAcquirer(provider, options).acquire())
    assert provider.calls == [options]


def test_default_options():
    acquirer = GeolocationAcquirer(None)
    assert acquirer.options.enable_high_accuracy is True
    assert acquirer.options.timeout_ms == 10_000
    assert acquirer.options.maximum_age_ms == 300_000


def test_missing_provider_is_unsupported():
    with pytest.raises(GeolocationUnsupportedError) as exc:
        asyncio.run(GeolocationAcquirer(None).acquire())
    assert exc.value.cause is AcquisitionFailureCause.UNSUPPORTED


@pytest.mark.parametrize(
    "error", [PermissionDeniedError(), PositionUnavailableError(), AcquisitionTimeoutError()]
)
def test_provider_errors_propagate(error):
    provider = ScriptedProvider(error=error)
    with pytest.raises(type(error)) as exc:
        asyncio.run(GeolocationAcquirer(provider).acquire())
    assert exc.value is error
    assert len(provider.calls) == 1


def test_slow_provider_times_out(lagos):
    provider = ScriptedProvider(coordinate=lagos, delay_s=1.0)
    acquirer = GeolocationAcquirer(provider, PositionOptions(timeout_ms=10))
    with pytest.raises(AcquisitionTimeoutError) as exc:
        asyncio.run(acquirer.acquire())
    assert exc.value.cause is AcquisitionFailureCause.TIMEOUT
