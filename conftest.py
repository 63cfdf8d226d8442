import pytest
from device import SmartLight, SmartThermostat
from manager import DeviceManager


@pytest.fixture
def light():
    return SmartLight(id="L1", name="LivingRoomLight", location="Living Room", brightness=75, color="White")


@pytest.fixture
def thermostat():
    return SmartThermostat(id="T1", name="BedroomThermo", location="Bedroom", temperature=22.5, mode="Cool")


@pytest.fixture
def manager(light, thermostat):
    dm = DeviceManager()
    dm.add_device(light)
    dm.add_device(thermostat)
    return dm


@pytest.fixture
def scripted_prompt():
    # Stand-in for input(): replays the given answers, then behaves like closed stdin
    def factory(*answers):
        remaining = iter(answers)

        def prompt(message):
            prompt.asked.append(message)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError("EOF when reading a line") from None

        prompt.asked = []
        return prompt

    return factory
