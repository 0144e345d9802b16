"""Shutter listing scraped from the device page's embedded JSON."""

import requests

from .config import DEVICE_LIST_PAGE, DEVICE_LIST_PATH
from .errors import DeviceListUnavailable
from .extract import extract_init_payloads
from .logging_setup import log
from .models import Device
from .session import base_url, fetch_page, make_soup


def build_device_listing(descriptors: list) -> dict[str, Device]:
    """
    Key *descriptors* by display name in document order.

    Names are not unique on the gateway: a later descriptor replaces an
    earlier one with the same name.
    """
    devices: dict[str, Device] = {}
    for descriptor in descriptors:
        device = Device.from_dict(descriptor)
        previous = devices.get(device.name)
        if previous is not None and previous.identity != device.identity:
            log.warning(
                "Duplicate device name %r: %s replaces %s",
                device.name, device.identity, previous.identity,
            )
        devices[device.name] = device
    return devices


def get_shutter(session: requests.Session, address: str) -> dict[str, Device]:
    """
    Return the shutters configured on the gateway at *address*, keyed by name.

    Only the first listing page is read.  A page without an ``init(...)``
    payload yields an empty dict.
    """
    url = base_url(address) + DEVICE_LIST_PATH
    try:
        html = fetch_page(session, url, params={"page": DEVICE_LIST_PAGE})
        descriptors = []
        for payload in extract_init_payloads(make_soup(html)):
            descriptors.extend(payload)
        devices = build_device_listing(descriptors)
    except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
        raise DeviceListUnavailable("Can't get AiSEG2 shutter list.") from exc
    log.debug("Shutters on %s: %s", address, list(devices))
    return devices
