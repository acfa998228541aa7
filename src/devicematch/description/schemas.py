"""
Pydantic schema for the serialized device description.

The wire form is a flat JSON object of string fields. "interface" and
"type" carry the interface name and device class.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class DeviceDescriptionSchema(BaseModel):
    """Serialized device description."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    interface_name: StrictStr | None = Field(None, alias="interface")
    device_class: StrictStr | None = Field(None, alias="type")
    manufacturer: StrictStr | None = None
    product: StrictStr | None = None
    serial: StrictStr | None = None
    version: StrictStr | None = None
    capabilities: StrictStr | None = None
