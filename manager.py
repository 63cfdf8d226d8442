from typing import Generic, Iterator, List, Tuple, TypeVar

import structlog
from pydantic import ValidationError

from device import Prompt, SmartDevice, error_kind

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=SmartDevice)


class DeviceManager(Generic[T]):
    """Keeps registered devices in insertion order and applies bulk operations.

    Devices are held by reference, so changes made through the manager are
    visible to every other holder. Ids are not required to be unique.
    """

    def __init__(self) -> None:
        self._devices: List[T] = []

    @property
    def devices(self) -> Tuple[T, ...]:
        return tuple(self._devices)

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[T]:
        return iter(self._devices)

    def add_device(self, device: T) -> None:
        self._devices.append(device)

    def display_all(self) -> None:
        print("\n--- Device List ---")
        for device in self._devices:
            device.display_status()

    def toggle_all(self) -> None:
        for device in self._devices:
            device.toggle_status()

    def perform_actions(self, prompt: Prompt = input) -> None:
        # one bad answer must not stop the remaining devices
        for device in self._devices:
            try:
                device.perform_action(prompt)
            except ValidationError as e:
                logger.error(
                    "device_action_failed",
                    device_id=device.id,
                    kind=error_kind(e).value,
                    error=str(e),
                )
            except EOFError:
                # input closed, nothing more to read for this device
                logger.error("device_action_failed", device_id=device.id, error="end of input")

    def save_all_to_file(self, path: str) -> bool:
        try:
            out = open(path, "w", encoding="utf-8")
        except OSError as e:
            logger.error("devices_save_failed", path=str(path), error=str(e))
            return False

        with out:
            for device in self._devices:
                device.save_to_file(out)
        logger.info("devices_saved", path=str(path), count=len(self._devices))
        return True
