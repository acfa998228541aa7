"""
Device description parser.

Parses JSON text, dictionaries and YAML files into DeviceDescription
objects.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from devicematch.description.models import DeviceDescription
from devicematch.description.schemas import DeviceDescriptionSchema


class ParseError(Exception):
    """Error parsing a serialized device description."""

    pass


def _from_schema(schema: DeviceDescriptionSchema) -> DeviceDescription:
    return DeviceDescription(
        interface_name=schema.interface_name,
        device_class=schema.device_class,
        manufacturer=schema.manufacturer,
        product=schema.product,
        serial=schema.serial,
        version=schema.version,
        capabilities=schema.capabilities,
    )


def parse_description_json(text: str | bytes) -> DeviceDescription:
    """
    Parse a device description from a JSON object string.

    Args:
        text: JSON text as produced by DeviceDescription.to_json()

    Returns:
        DeviceDescription

    Raises:
        ParseError: If text is not a JSON object of string fields
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ParseError(f"Invalid JSON: {e}") from e
    return parse_description(data)


def parse_description(data: Any) -> DeviceDescription:
    """
    Parse a device description from a mapping.

    Args:
        data: Mapping keyed by JSON field names

    Returns:
        DeviceDescription
    """
    if not isinstance(data, Mapping):
        raise ParseError("Device description must be a dictionary")

    try:
        schema = DeviceDescriptionSchema.model_validate(dict(data))
    except ValidationError as e:
        raise ParseError(f"Invalid device description: {e}") from e
    return _from_schema(schema)


def parse_descriptions(data: Any) -> list[DeviceDescription]:
    """
    Parse a list of device descriptions.

    Args:
        data: List of dictionaries, or a dictionary with a 'devices' list

    Returns:
        List of DeviceDescription objects in input order
    """
    if isinstance(data, Mapping):
        data = data.get("devices", [])
    if not isinstance(data, list):
        raise ParseError("'devices' must be a list")

    descriptions = []
    for i, item in enumerate(data):
        try:
            descriptions.append(parse_description(item))
        except ParseError as e:
            raise ParseError(f"Error parsing description {i}: {e}") from e

    return descriptions


def load_descriptions(path: str | Path) -> list[DeviceDescription]:
    """
    Load device descriptions from a YAML or JSON file.

    Args:
        path: Path to file

    Returns:
        List of DeviceDescription objects

    Raises:
        FileNotFoundError: If file doesn't exist
        ParseError: If file contains invalid descriptions
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Description file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return []

    return parse_descriptions(data)
