"""
Operation page scraping.

The operation page renders its form state as unlabelled hidden spans::

    <span class="setting_value" style="display:none;">76856</span>
    <span class="setting_value" style="display:none;">53529</span>
    ...

Their meaning is purely positional; ``OPERATION_SLOTS`` records the order.
"""

import requests

from .config import (
    OPERATION_PAGE_PATH,
    OPERATION_PAGE_PREFIX,
    OPERATION_PAGE_SUFFIX,
)
from .logging_setup import log
from .models import Device
from .session import base_url, fetch_page, make_soup

OPERATION_SLOTS = (
    "control_id",
    "token",
    "caller_url",
    "device_type",
    "device_name",
    "device_info",
    "transition_info",
)
OPERATION_TOKEN_INDEX = OPERATION_SLOTS.index("token")

_SETTING_VALUE_CLASS = "setting_value"


def parse_setting_values(html: str) -> list[str]:
    soup = make_soup(html)
    return [el.get_text() for el in soup.find_all(class_=_SETTING_VALUE_CLASS)]


def operation_token(slots: list[str]) -> str:
    """Return the single-use operation token; raises LookupError if absent."""
    if len(slots) <= OPERATION_TOKEN_INDEX:
        raise LookupError(
            f"operation page has {len(slots)} setting values, token expected "
            f"at index {OPERATION_TOKEN_INDEX}"
        )
    return slots[OPERATION_TOKEN_INDEX]


def fetch_operation_page(session: requests.Session, address: str, device: Device) -> list[str]:
    """Fetch *device*'s operation page and return its hidden values in order."""
    params = {
        **OPERATION_PAGE_PREFIX,
        "nodeId": device.node_id,
        "eoj":    device.eoj,
        "type":   device.type,
        **OPERATION_PAGE_SUFFIX,
    }
    html = fetch_page(session, base_url(address) + OPERATION_PAGE_PATH, params=params)
    slots = parse_setting_values(html)
    log.debug("Operation page for %s: %d setting values", device.name, len(slots))
    return slots
