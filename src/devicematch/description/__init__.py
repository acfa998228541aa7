"""
Device descriptions.

Identity records for input devices, pattern matching of a device against
a template's description, and the JSON form used to persist them.
"""

from devicematch.description.matcher import MATCH_FIELDS, PatternError, match_pair, matches
from devicematch.description.models import WIRE_NAMES, DeviceDescription
from devicematch.description.parser import (
    ParseError,
    load_descriptions,
    parse_description,
    parse_description_json,
    parse_descriptions,
)
from devicematch.description.schemas import DeviceDescriptionSchema

__all__ = [
    # Models
    "DeviceDescription",
    "DeviceDescriptionSchema",
    "MATCH_FIELDS",
    "WIRE_NAMES",
    # Matching
    "PatternError",
    "match_pair",
    "matches",
    # Parser
    "ParseError",
    "load_descriptions",
    "parse_description",
    "parse_description_json",
    "parse_descriptions",
]
