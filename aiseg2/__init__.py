"""
aiseg2
======
Python client for the HTML control panel of a Panasonic AiSEG2 home
energy-management gateway.

Package structure
-----------------
aiseg2/
├── __init__.py       – package init and public API
├── config.py         – configuration constants
├── logging_setup.py  – colorlog logger
├── errors.py         – error kinds
├── session.py        – requests.Session factory (digest auth, fixed headers)
├── models.py         – Device, Room, OperationCode
├── discovery.py      – SSDP discovery
├── devices.py        – shutter listing scraper
├── operation.py      – operation page / token scraper
├── shutter.py        – open / close / stop submit
├── air.py            – room temperature / humidity reader
├── client.py         – AiSeg2 facade
├── cli.py            – argparse CLI (``python -m aiseg2``)
└── extract/          – sub-package: markup decoders
    ├── __init__.py
    ├── script.py     – JSON embedded in inline scripts
    └── segments.py   – room names and digit-glyph readings

Quick start
-----------
    from aiseg2 import AiSeg2

    aiseg = AiSeg2(username="aiseg", password="your_password")
    address = aiseg.discover()
    shutters = aiseg.get_shutter(address)
    aiseg.do_shutter(address, shutters["Garage shutter"], "close")
"""

from .client import AiSeg2
from .discovery import discover
from .devices import get_shutter
from .operation import fetch_operation_page, operation_token
from .shutter import do_shutter
from .air import get_air_environment
from .models import Device, Room, OperationCode, ShutterInfo
from .errors import (
    AiSeg2Error,
    DiscoveryTimeout,
    DeviceListUnavailable,
    ShutterOperationFailed,
    AirEnvironmentUnavailable,
)

__all__ = [
    "AiSeg2",
    "discover",
    "get_shutter",
    "fetch_operation_page",
    "operation_token",
    "do_shutter",
    "get_air_environment",
    "Device",
    "Room",
    "OperationCode",
    "ShutterInfo",
    "AiSeg2Error",
    "DiscoveryTimeout",
    "DeviceListUnavailable",
    "ShutterOperationFailed",
    "AirEnvironmentUnavailable",
]
