"""Configuration constants for the AiSEG2 gateway client."""

import os

# Credentials can also be supplied via AISEG2_USER / AISEG2_PASSWORD env vars
DEFAULT_USER = os.environ.get("AISEG2_USER", "aiseg")
DEFAULT_PASSWORD = os.environ.get("AISEG2_PASSWORD", "")
# Empty host means "find the gateway over SSDP"
DEFAULT_HOST = os.environ.get("AISEG2_HOST", "")

PORT = 80

REQUEST_TIMEOUT   = 10     # seconds per HTTP request
DISCOVERY_TIMEOUT = 5.0    # seconds to wait for the first SSDP response

# SSDP multicast search
SSDP_ADDRESS = "239.255.255.250"
SSDP_PORT    = 1900
SSDP_MX      = 3
SSDP_TTL     = 2
SERVICE_TYPE = "urn:panasonic-com:service:p60AiSeg2DataService:1"

# The gateway rejects requests that do not carry exactly these headers
REQUEST_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
    "User-Agent":   "Node.js",
}

# Shutter pages live under the "325" device page family
DEVICE_LIST_PATH      = "/page/devices/device/325"
OPERATION_PAGE_PATH   = "/page/devices/device/325/operation_pu"
OPERATION_SUBMIT_PATH = "/action/devices/device/325/operation"
AIR_ENVIRONMENT_PATH  = "/page/airenvironment/43"

# Fixed form values the operation page expects; the gateway does not
# interpret them beyond matching its own form shape.  The device's
# nodeId / eoj / type go between the prefix and the suffix.
OPERATION_PAGE_PREFIX = {
    "page":            "1",
    "page325":         "1",
}
OPERATION_PAGE_SUFFIX = {
    "track":           "325",
    "acceptId":        "83038",
    "request_by_form": "1",
}

DEVICE_LIST_PAGE = "1"
AIR_ENVIRONMENT_PAGES = (1, 2)
