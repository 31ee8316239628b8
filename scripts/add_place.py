#!/usr/bin/env python3
"""
Save a place directly into the local database, or list the saved ones.

Usage:
  python scripts/add_place.py --title Park --image file:///tmp/a.jpg --lat 10.5 --lng 20.25 [--address "Main St"]
  python scripts/add_place.py --list
"""
from __future__ import annotations

import argparse
import sys

from placebook.core.logging_config import setup_logging
from placebook.services.place_service import PlaceService


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Save a place in the local database")
    ap.add_argument("--list", action="store_true", help="List saved places and exit")
    ap.add_argument("--title", help="Place title")
    ap.add_argument("--image", help="Path/URI of the place picture")
    ap.add_argument("--lat", type=float, help="Latitude")
    ap.add_argument("--lng", type=float, help="Longitude")
    ap.add_argument("--address", help="Address (default: reverse geocoded)")
    args = ap.parse_args(argv)

    setup_logging()
    svc = PlaceService()
    svc.repository.initialize()

    if args.list:
        for place in svc.list_places():
            loc = place.location
            print(f"{place.id:>4}  {place.title}  ({loc.lat}, {loc.lng})  {place.address}")
        return

    if args.lat is None or args.lng is None:
        raise SystemExit("--lat and --lng are required")
    place = svc.add_place(args.title, args.image, args.lat, args.lng, address=args.address)
    print("OK: place saved")
    print(f"  ID: {place.id}")
    print(f"  Title: {place.title}")
    print(f"  Address: {place.address}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
