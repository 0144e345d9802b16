"""
Tests for the shutter listing scraper.
"""

import json
import unittest
from unittest.mock import MagicMock

import requests

from aiseg2.devices import build_device_listing, get_shutter
from aiseg2.errors import DeviceListUnavailable
from aiseg2.extract import extract_init_payloads
from aiseg2.models import Device
from aiseg2.session import make_soup

GARAGE = {
    "nodeId": "268566528",
    "eoj": "0x026301",
    "type": "0x0e",
    "agree": "0x31",
    "name": "Garage shutter",
    "state": "0x30",
    "entry": "1",
    "shutter": {"openState": "0x43", "type": "0x1010", "version": "1"},
    "condition": "Opening",
}


def _listing_page(descriptors):
    return (
        "<html><head>"
        '<script src="/js/init.js"></script>'
        '<script type="text/javascript">window.onload = init('
        + json.dumps(descriptors)
        + ");</script></head><body></body></html>"
    )


def _session(text):
    session = MagicMock(spec=requests.Session)
    resp = MagicMock()
    resp.text = text
    session.get.return_value = resp
    return session


class TestExtractInitPayloads(unittest.TestCase):
    def test_extracts_array(self):
        soup = make_soup(_listing_page([GARAGE]))
        self.assertEqual(extract_init_payloads(soup), [[GARAGE]])

    def test_ignores_external_scripts(self):
        html = '<script src="/js/init.js">window.onload = init([1])</script>'
        self.assertEqual(extract_init_payloads(make_soup(html)), [])

    def test_stops_at_end_of_init_argument(self):
        html = (
            "<script>window.onload = init(" + json.dumps([GARAGE]) + ");\n"
            "function refresh(){ update([1, 2]); }</script>"
        )
        self.assertEqual(extract_init_payloads(make_soup(html)), [[GARAGE]])

    def test_parenthesis_inside_name(self):
        device = dict(GARAGE, name="Garage (east)])")
        html = "<script>window.onload = init(" + json.dumps([device]) + ");</script>"
        self.assertEqual(extract_init_payloads(make_soup(html)), [[device]])

    def test_no_payload(self):
        html = "<script>var x = 1;</script>"
        self.assertEqual(extract_init_payloads(make_soup(html)), [])


class TestBuildDeviceListing(unittest.TestCase):
    def test_keyed_by_name(self):
        devices = build_device_listing([GARAGE])
        self.assertEqual(list(devices), ["Garage shutter"])
        device = devices["Garage shutter"]
        self.assertEqual(device.node_id, "268566528")
        self.assertEqual(device.shutter.open_state, "0x43")
        self.assertEqual(device.raw, GARAGE)

    def test_later_duplicate_wins(self):
        first = dict(GARAGE, nodeId="1")
        second = dict(GARAGE, nodeId="2")
        with self.assertLogs("aiseg2", "WARNING") as logs:
            devices = build_device_listing([first, second])
        self.assertEqual(len(devices), 1)
        self.assertEqual(devices["Garage shutter"].node_id, "2")
        self.assertIn("Duplicate device name 'Garage shutter'", logs.output[0])

    def test_non_shutter_has_no_shutter_record(self):
        plain = {"nodeId": "3", "eoj": "0x028801", "type": "0x02", "name": "Meter"}
        self.assertIsNone(build_device_listing([plain])["Meter"].shutter)


class TestGetShutter(unittest.TestCase):
    def test_fetches_listing_page(self):
        session = _session(_listing_page([GARAGE]))
        devices = get_shutter(session, "192.168.0.216")
        self.assertIsInstance(devices["Garage shutter"], Device)
        args, kwargs = session.get.call_args
        self.assertEqual(args[0], "http://192.168.0.216/page/devices/device/325")
        self.assertEqual(kwargs["params"], {"page": "1"})

    def test_later_array_call_in_same_script(self):
        descriptor = {"nodeId": "1", "eoj": "0x026301", "type": "0x0e", "name": "G"}
        session = _session(
            "<script>window.onload = init(" + json.dumps([descriptor]) + ");\n"
            "function refresh(){ update([1, 2]); }</script>"
        )
        devices = get_shutter(session, "192.168.0.216")
        self.assertEqual(list(devices), ["G"])
        self.assertEqual(devices["G"].node_id, "1")

    def test_page_without_payload_is_empty(self):
        session = _session("<html><body>nothing</body></html>")
        self.assertEqual(get_shutter(session, "192.168.0.216"), {})

    def test_transport_error_wrapped(self):
        session = MagicMock(spec=requests.Session)
        err = requests.ConnectionError("unreachable")
        session.get.side_effect = err
        with self.assertRaises(DeviceListUnavailable) as ctx:
            get_shutter(session, "192.168.0.216")
        self.assertIs(ctx.exception.__cause__, err)

    def test_malformed_json_wrapped(self):
        session = _session("<script>window.onload = init([{broken]);</script>")
        with self.assertRaises(DeviceListUnavailable):
            get_shutter(session, "192.168.0.216")


if __name__ == "__main__":
    unittest.main()
