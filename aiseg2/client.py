"""High-level AiSEG2 client bundling the session and every operation."""

import requests

from . import air, devices, discovery, operation, shutter
from .models import Device, OperationCode, Room
from .session import build_session


class AiSeg2:
    """
    Browser-like session against one AiSEG2 gateway.

    The address is passed to every call so that it can come from
    ``discover()`` or from configuration.
    """

    op_list = OperationCode

    def __init__(self, username: str, password: str,
                 session: requests.Session | None = None) -> None:
        self.session = session or build_session(username, password)

    def discover(self) -> str:
        return discovery.discover()

    def get_shutter(self, address: str) -> dict[str, Device]:
        return devices.get_shutter(self.session, address)

    def fetch_operation_page(self, address: str, device: Device) -> list[str]:
        return operation.fetch_operation_page(self.session, address, device)

    def do_shutter(self, address: str, device: Device, op: OperationCode | str) -> str:
        return shutter.do_shutter(self.session, address, device, op)

    def get_air_environment(self, address: str) -> list[Room]:
        return air.get_air_environment(self.session, address)
