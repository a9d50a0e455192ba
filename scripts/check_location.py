#!/usr/bin/env python3
"""Run a boundary check from the command line.

Acquires the current position (static or IP-based), evaluates it against the
target region and plays the notification lifecycle on the console.

Usage:
    python scripts/check_location.py                      # provider from env (default: ip)
    python scripts/check_location.py --lat 51.5074 --lon -0.1278
    python scripts/check_location.py --known              # known-location report
    python scripts/check_location.py --lat 40.7 --lon -74 --dismiss-after 1.5

Configuration:
    BOUNDARY_ALERT_* environment variables (see application/settings.py).
    Run with PYTHONPATH=src:. or after ``pip install -e .``.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from application.acquisition import GeolocationAcquirer
from application.boundary_check import BoundaryChecker
from application.enrichment import ContextEnricher
from application.region_alert import RegionAlert
from application.settings import Settings
from domain.location.repositories import PositionProvider
from domain.location.services import evaluate_places
from domain.location.value_objects import Coordinate
from infrastructure.location import (
    BigDataCloudGeocoder,
    IpPositionProvider,
    StaticPositionProvider,
)
from shared.known_locations import KNOWN_LOCATIONS

logger = logging.getLogger("check_location")


class ConsoleHost:
    """NotificationHost printing lifecycle events."""

    def show(self, message: str, country_hint: str | None = None) -> None:
        hint = f" [{country_hint}]" if country_hint else ""
        print(f"NOTIFY{hint}: {message}")

    def auto_hide_scheduled(self, deadline: float) -> None:
        logger.debug("auto-hide scheduled at loop time %.3f", deadline)

    def dismissed(self) -> None:
        print("(notification dismissed)")


def build_provider(settings: Settings) -> PositionProvider | None:
    if settings.position_provider == "static":
        return StaticPositionProvider(settings.static_coordinate)
    if settings.position_provider == "ip":
        return IpPositionProvider(settings.ip_location_url)
    return None


def build_checker(settings: Settings, provider: PositionProvider | None) -> BoundaryChecker:
    geocoder = BigDataCloudGeocoder(
        endpoint=settings.geocoder_url,
        locality_language=settings.locality_language,
        timeout_s=settings.geocoder_timeout_s,
    )
    return BoundaryChecker(
        GeolocationAcquirer(provider, settings.position_options()),
        ContextEnricher(geocoder),
    )


async def run_check(
    settings: Settings, provider: PositionProvider | None, dismiss_after: float | None
) -> int:
    alert = RegionAlert(
        build_checker(settings, provider),
        ConsoleHost(),
        alert_when_outside=settings.alert_when_outside,
        timings=settings.notification_timings(),
    )
    session = await alert.run()
    result = session.result

    status = "inside" if result.is_in_region else "outside"
    if not result.determined:
        status = f"undetermined ({result.failure.value if result.failure else '?'})"
    print(f"Result: {status}")
    print(result.message)
    if result.distance_km is not None:
        print(f"Distance to reference: {result.distance_km:.0f} km")

    if dismiss_after is not None and session.notified:
        await asyncio.sleep(dismiss_after)
        session.lifecycle.dismiss()
    await session.lifecycle.wait_settled()
    return 0


def print_known_report() -> int:
    rows = evaluate_places(KNOWN_LOCATIONS.values())
    width = max(len(name) for name, _, _ in rows)
    for name, inside, km in rows:
        label = "inside " if inside else "outside"
        print(f"{name:<{width}}  {label}  {km:>6} km")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check whether a position is inside Nigeria")
    parser.add_argument("--lat", type=float, help="Latitude for a static position")
    parser.add_argument("--lon", type=float, help="Longitude for a static position")
    parser.add_argument("--known", action="store_true", help="Report known locations and exit")
    parser.add_argument(
        "--dismiss-after", type=float, default=None, help="Simulate a user dismissal after N seconds"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.known:
        return print_known_report()

    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    if args.lat is not None:
        try:
            coord = Coordinate(latitude=args.lat, longitude=args.lon)
        except ValueError as e:
            parser.error(f"invalid coordinate: {e}")
        provider: PositionProvider | None = StaticPositionProvider(coord)
    else:
        provider = build_provider(settings)

    return asyncio.run(run_check(settings, provider, args.dismiss_after))


if __name__ == "__main__":
    sys.exit(main())
