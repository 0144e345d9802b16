"""
Shutter open / close / stop.

Each operation is two round-trips: fetch the operation page for a fresh
token, then POST the mutation.  The gateway offers no compare-and-swap, so
the shutter may change state between the two; that race is accepted.
"""

import json

import requests

from .config import OPERATION_SUBMIT_PATH, REQUEST_TIMEOUT
from .errors import ShutterOperationFailed
from .logging_setup import log
from .models import Device, OperationCode
from .operation import fetch_operation_page, operation_token
from .session import base_url


def _dumps(obj) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


def build_shutter_payload(device: Device, op: OperationCode) -> dict:
    return {
        "nodeId": device.node_id,
        "eoj":    device.eoj,
        "type":   device.type,
        "device": {"open": op.value},
    }


def encode_shutter_body(device: Device, op: OperationCode, token: str) -> str:
    """
    Build the ``data=`` form body for the operation submit.

    ``objSendData`` must be a JSON *string* inside the outer JSON object,
    not a nested object; the gateway rejects anything else.
    """
    outer = {
        "objSendData": _dumps(build_shutter_payload(device, op)),
        "token":       token,
    }
    return "data=" + _dumps(outer)


def do_shutter(session: requests.Session, address: str, device: Device,
               op: OperationCode | str) -> str:
    """
    Run *op* on *device* and return a confirmation message.

    A fresh token is fetched for every call.  Any failure raises
    ``ShutterOperationFailed``; nothing is retried.
    """
    try:
        op = OperationCode.parse(op)
        token = operation_token(fetch_operation_page(session, address, device))
        log.debug("do_shutter: %s %s %s %s", device.node_id, device.eoj, device.type, op.name)
        resp = session.post(
            base_url(address) + OPERATION_SUBMIT_PATH,
            data=encode_shutter_body(device, op, token).encode("utf-8"),
            timeout=REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
    except (requests.RequestException, LookupError, ValueError) as exc:
        raise ShutterOperationFailed(f"shutter {device.name} operation failed.") from exc
    message = f"shutter {device.name} operation {op.name.lower()} success."
    log.info(message)
    return message
