#!/usr/bin/env python3
"""
Drive a full search session against a running nearby backend and print
what the map and list views would show.

Usage: search_nearby.py [min_price] [max_price] [radius]
"""

import asyncio
import json
import os
import sys

from dotenv import load_dotenv

from foodfinder.config import BACKEND_URL
from foodfinder.session.controller import SearchSession
from foodfinder.session.geolocation import IpGeolocation, PositionOptions, StaticGeolocation
from foodfinder.utils.general_utils import get_nearby_search_client


def make_geolocation():
    latitude = os.getenv("FOODFINDER_LATITUDE")
    longitude = os.getenv("FOODFINDER_LONGITUDE")
    if latitude and longitude:
        return StaticGeolocation(float(latitude), float(longitude))
    return IpGeolocation()


async def run(args):
    session = SearchSession(
        backend=get_nearby_search_client(os.getenv("FOODFINDER_BACKEND_URL", BACKEND_URL)),
        geolocation=make_geolocation(),
        position_options=PositionOptions(timeout=10),
    )

    if await session.locate() is None:
        print(session.location_error)
        return 1

    if len(args) > 0:
        session.set_min_price(args[0])
    if len(args) > 1:
        session.set_max_price(args[1])
    if len(args) > 2:
        session.set_radius_input(args[2])

    await session.search()
    if session.notice:
        print(session.notice)
        return 1

    list_view = session.list_view()
    if list_view.message:
        print(list_view.message)

    if list_view.rows:
        # Highlight the first result the way a row click would
        session.on_row_click(list_view.rows[0].id)

    print(json.dumps(session.map_view().model_dump(mode="json"), indent=2))
    for row in session.list_view().rows:
        marker = "*" if row.is_selected else " "
        print(f"{marker} {row.place.name} ({row.place.rating or '-'}) {row.place.address}")
    return 0


def main():
    load_dotenv()
    sys.exit(asyncio.run(run(sys.argv[1:])))


if __name__ == "__main__":
    main()
