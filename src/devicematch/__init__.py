"""
devicematch - input device description matching.

Describes an input device's identity and decides whether a device
matches the description declared by a template.
"""

__version__ = "0.1.0"

from devicematch.config import DeviceMatchConfig, load_config
from devicematch.description import DeviceDescription, ParseError, PatternError

__all__ = [
    "DeviceDescription",
    "DeviceMatchConfig",
    "ParseError",
    "PatternError",
    "load_config",
    "__version__",
]
