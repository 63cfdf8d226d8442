from typing import Optional

import structlog
from pydantic import ValidationError

from device import Prompt, SmartDevice, SmartLight, SmartThermostat, error_kind
from logging_config import configure_logging
from manager import DeviceManager

logger = structlog.get_logger(__name__)


# Declare application parameters
DEVICES_FILE = "devices.txt"
LOG_LEVEL = "INFO"


def build_devices():
    light = SmartLight(id="L1", name="LivingRoomLight", location="Living Room", brightness=75, color="White")
    thermo = SmartThermostat(id="T1", name="BedroomThermo", location="Bedroom", temperature=22.5, mode="Cool")
    return [light, thermo]


def run(prompt: Prompt = input, path: str = DEVICES_FILE) -> Optional[DeviceManager[SmartDevice]]:
    """Register the demo devices and walk them through every bulk operation."""
    manager: DeviceManager[SmartDevice] = DeviceManager()

    try:
        for device in build_devices():
            manager.add_device(device)
    except ValidationError as e:
        logger.error("setup_failed", kind=error_kind(e).value, error=str(e))
        return None

    manager.display_all()
    manager.toggle_all()
    manager.perform_actions(prompt)
    manager.save_all_to_file(path)
    return manager


def main():
    configure_logging(LOG_LEVEL)
    run()


if __name__ == "__main__":
    main()
