"""Data structures scraped from the AiSEG2 control panel."""

from dataclasses import dataclass, field
from enum import Enum


class OperationCode(Enum):
    """Shutter operations and the code the gateway expects for each."""

    OPEN = "0"
    CLOSE = "1"
    STOP = "2"

    @classmethod
    def parse(cls, value: "OperationCode | str") -> "OperationCode":
        """Accept an OperationCode, an operation name ('open') or a wire code ('0')."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        try:
            return cls[text.upper()]
        except KeyError:
            return cls(text)


@dataclass
class ShutterInfo:
    open_state: str = ""
    type: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "ShutterInfo":
        return cls(
            open_state=data.get("openState", ""),
            type=data.get("type", ""),
            version=data.get("version", ""),
        )


@dataclass
class Device:
    """
    One device descriptor embedded in the device listing page.

    ``name`` is only a display label; ``identity`` (nodeId, eoj) is the
    hardware identity.  ``raw`` keeps the descriptor as the gateway sent it.
    """
    node_id: str
    eoj: str
    type: str
    name: str = ""
    agree: str = ""
    state: str = ""
    entry: str = ""
    condition: str = ""
    shutter: ShutterInfo | None = None
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "Device":
        shutter = data.get("shutter")
        return cls(
            node_id=str(data["nodeId"]),
            eoj=str(data["eoj"]),
            type=str(data["type"]),
            name=data.get("name", ""),
            agree=data.get("agree", ""),
            state=data.get("state", ""),
            entry=data.get("entry", ""),
            condition=data.get("condition", ""),
            shutter=ShutterInfo.from_dict(shutter) if isinstance(shutter, dict) else None,
            raw=dict(data),
        )

    @property
    def identity(self) -> tuple[str, str]:
        return (self.node_id, self.eoj)


@dataclass
class Room:
    """Temperature / humidity reading for one room, as displayed."""
    name: str
    temp: str
    humi: str
