"""
Error kinds raised by the AiSEG2 client.

Every operation converts transport and parse failures into one of the
subclasses below and chains the original exception as ``__cause__``.
"""


class AiSeg2Error(Exception):
    """Base class for all gateway errors."""


class DiscoveryTimeout(AiSeg2Error):
    """No gateway answered the SSDP search in time."""


class DeviceListUnavailable(AiSeg2Error):
    """The shutter listing page could not be fetched or parsed."""


class ShutterOperationFailed(AiSeg2Error):
    """The token fetch or the operation submit failed."""


class AirEnvironmentUnavailable(AiSeg2Error):
    """One of the air-environment pages could not be fetched or parsed."""
