"""
Device description data model.

Describes the identity of an input device as reported by a backend, and
is used as a pattern when matching devices against templates.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any

from devicematch.description.matcher import matches as _matches


# Attribute name -> JSON field name
WIRE_NAMES = {
    "interface_name": "interface",
    "device_class": "type",
    "manufacturer": "manufacturer",
    "product": "product",
    "serial": "serial",
    "version": "version",
    "capabilities": "capabilities",
}


@dataclass(frozen=True)
class DeviceDescription:
    """
    Metadata for a device.

    All fields are optional. An empty string is treated as absent and
    stored as None.
    """

    interface_name: str | None = None  # Backend, e.g. "HID"
    device_class: str | None = None  # Fallback template key, e.g. "Gamepad"
    manufacturer: str | None = None
    product: str | None = None
    serial: str | None = None
    version: str | None = None
    capabilities: str | None = None  # Opaque JSON blob, not interpreted here

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) == "":
                object.__setattr__(self, f.name, None)

    @property
    def is_empty(self) -> bool:
        """Check if no field is set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def display_name(self) -> str:
        """
        Get a human-readable name for the device.

        Prefers "manufacturer product", then product, then device class.
        Manufacturer alone is not used.
        """
        if self.product and self.manufacturer:
            return f"{self.manufacturer} {self.product}"
        if self.product:
            return self.product
        if self.device_class:
            return self.device_class
        return ""

    def __str__(self) -> str:
        return self.display_name()

    def matches(self, candidate: DeviceDescription, *, strict: bool = True) -> bool:
        """
        Check if a candidate device matches this description as a pattern.

        Args:
            candidate: Description of a concrete device
            strict: Raise PatternError on invalid regex instead of
                treating the field as a non-match

        Returns:
            True if every set field of this description matches
        """
        return _matches(self, candidate, strict=strict)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary using JSON field names, excluding None values."""
        result = {}
        for attr, key in WIRE_NAMES.items():
            value = getattr(self, attr)
            if value is not None:
                result[key] = value
        return result

    def to_json(self) -> str:
        """Serialize to a JSON object string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> DeviceDescription:
        """Create from dictionary with JSON field names."""
        from devicematch.description.parser import parse_description

        return parse_description(data)

    @classmethod
    def from_json(cls, text: str | bytes) -> DeviceDescription:
        """Create from a JSON object string."""
        from devicematch.description.parser import parse_description_json

        return parse_description_json(text)
