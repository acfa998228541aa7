"""
Pytest configuration and shared fixtures for devicematch tests.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import yaml

from devicematch.description import DeviceDescription


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def gamepad() -> DeviceDescription:
    """Description of a concrete HID gamepad."""
    return DeviceDescription(
        interface_name="HID",
        device_class="Gamepad",
        manufacturer="Sony Interactive Entertainment",
        product="Wireless Controller",
        serial="A1B2C3D4",
        version="0100",
        capabilities=json.dumps({"vendorId": 1356, "productId": 2508}),
    )


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample configuration file."""
    config_path = temp_dir / "devicematch.yaml"
    config_data = {
        "matching": {"strict_patterns": False},
        "logging": {"level": "debug"},
    }
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def sample_descriptions_file(temp_dir: Path) -> Path:
    """Create a YAML file listing device descriptions."""
    path = temp_dir / "devices.yaml"
    data = {
        "devices": [
            {
                "interface": "HID",
                "type": "Gamepad",
                "manufacturer": "Sony Interactive Entertainment",
                "product": "Wireless Controller",
                "version": "0100",
            },
            {
                "interface": "XInput",
                "type": "Gamepad",
            },
        ]
    }
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
