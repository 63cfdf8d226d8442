from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, ClassVar, List, Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = structlog.get_logger(__name__)

BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 100
TEMPERATURE_MIN = 16
TEMPERATURE_MAX = 30

RANGE_ERROR_TYPES = {"greater_than", "greater_than_equal", "less_than", "less_than_equal"}

Prompt = Callable[[str], str]


class Status(str, Enum):
    ON = "ON"
    OFF = "OFF"


class ErrorKind(str, Enum):
    OUT_OF_RANGE = "out_of_range"
    INVALID_ARGUMENT = "invalid_argument"


def error_kind(exc: ValidationError) -> ErrorKind:
    """Classify a device validation failure by its first error."""
    errors = exc.errors()
    if errors and errors[0]["type"] in RANGE_ERROR_TYPES:
        return ErrorKind.OUT_OF_RANGE
    return ErrorKind.INVALID_ARGUMENT


class SmartDevice(BaseModel, ABC):
    """Common identity and power state shared by every device kind.

    Fields are re-validated on assignment, so an update that breaks a
    constraint raises ``ValidationError`` and leaves the old value in place.
    """

    model_config = ConfigDict(validate_assignment=True)

    tag: ClassVar[str]

    id: str
    name: str
    location: str
    status: Status = Status.OFF

    @abstractmethod
    def perform_action(self, prompt: Prompt = input) -> None:
        """Interactively update the device's own settings."""

    @abstractmethod
    def detail_fields(self) -> List[str]:
        """Variant-specific values, in the order they are saved."""

    def display_status(self) -> None:
        print(f"ID: {self.id}, Name: {self.name}, Status: {self.status.value}, Location: {self.location}")

    def toggle_status(self) -> None:
        self.status = Status.OFF if self.status == Status.ON else Status.ON
        logger.info("device_toggled", device_id=self.id, name=self.name, status=self.status.value)

    def to_line(self) -> str:
        fields = [self.tag, self.id, self.name, self.status.value, self.location]
        return " ".join(fields + self.detail_fields())

    def save_to_file(self, out) -> None:
        out.write(self.to_line() + "\n")


class SmartLight(SmartDevice):
    tag: ClassVar[str] = "SmartLight"

    brightness: int = Field(ge=BRIGHTNESS_MIN, le=BRIGHTNESS_MAX)
    color: str = Field(min_length=1, pattern=r"^\S+$")

    def perform_action(self, prompt: Prompt = input) -> None:
        self.brightness = prompt(f"[{self.name}] Enter brightness ({BRIGHTNESS_MIN}–{BRIGHTNESS_MAX}): ").strip()
        self.color = prompt("Enter color: ").strip()
        logger.info("light_updated", device_id=self.id, brightness=self.brightness, color=self.color)

    def detail_fields(self) -> List[str]:
        return [str(self.brightness), self.color]

    def display_status(self) -> None:
        super().display_status()
        print(f"Brightness: {self.brightness}, Color: {self.color}")


class SmartThermostat(SmartDevice):
    tag: ClassVar[str] = "SmartThermostat"

    temperature: float = Field(ge=TEMPERATURE_MIN, le=TEMPERATURE_MAX)
    mode: Literal["Cool", "Heat"]

    def perform_action(self, prompt: Prompt = input) -> None:
        self.temperature = prompt(f"[{self.name}] Enter temperature ({TEMPERATURE_MIN}–{TEMPERATURE_MAX} °C): ").strip()
        self.mode = prompt("Enter mode (Cool/Heat): ").strip()
        logger.info("thermostat_updated", device_id=self.id, temperature=self.temperature, mode=self.mode)

    def detail_fields(self) -> List[str]:
        # shortest form, 22.0 is saved as "22"
        return [f"{self.temperature:g}", self.mode]

    def display_status(self) -> None:
        super().display_status()
        print(f"Temperature: {self.temperature:g}°C, Mode: {self.mode}")
