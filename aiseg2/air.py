"""Room temperature / humidity from the air-environment pages."""

import requests

from .config import AIR_ENVIRONMENT_PAGES, AIR_ENVIRONMENT_PATH
from .errors import AirEnvironmentUnavailable
from .extract import parse_display_name, parse_segment_digits
from .logging_setup import log
from .models import Room
from .session import base_url, fetch_page, make_soup


def parse_rooms(html: str) -> list[Room]:
    """
    Parse one air-environment page.

    Each ``.base`` tile inside ``#area`` is a room; empty tiles are unused
    slots and are skipped.  Raises LookupError when ``#area`` is missing.
    """
    soup = make_soup(html)
    area = soup.find(id="area")
    if area is None:
        raise LookupError("air-environment page has no #area element")

    rooms = []
    for base in area.find_all(class_="base"):
        if base.decode_contents() == "":
            continue
        rooms.append(Room(
            name=parse_display_name(base.find_all(class_="txt_name")),
            temp=parse_segment_digits(base.find_all(class_="num_ond")),
            humi=parse_segment_digits(base.find_all(class_="num_shitudo")),
        ))
    return rooms


def get_air_environment(session: requests.Session, address: str) -> list[Room]:
    """Read both listing pages and return every room in page order."""
    url = base_url(address) + AIR_ENVIRONMENT_PATH
    rooms: list[Room] = []
    try:
        for page in AIR_ENVIRONMENT_PAGES:
            rooms.extend(parse_rooms(fetch_page(session, url, params={"page": page})))
    except (requests.RequestException, LookupError) as exc:
        raise AirEnvironmentUnavailable("getAirEnvironment operation failed.") from exc
    log.debug("Air environment on %s: %d rooms", address, len(rooms))
    return rooms
