"""Tests for the air purifier accessory hooks."""

import pytest

from custom_components.windmill.accessory import (
    AirPurifierAccessory,
    air_quality_from_pm25,
    filter_change_from_life,
)
from custom_components.windmill.exceptions import CharacteristicNotWritable, TransportError
from custom_components.windmill.models import (
    Active,
    AirPurifierPin,
    AirQuality,
    CurrentAirPurifierState,
    FilterChangeIndication,
    LockPhysicalControls,
    TargetAirPurifierState,
)


@pytest.mark.parametrize(
    "pm25, quality",
    [
        (0, AirQuality.EXCELLENT),
        (12, AirQuality.EXCELLENT),
        (13, AirQuality.GOOD),
        (35, AirQuality.GOOD),
        (36, AirQuality.FAIR),
        (55, AirQuality.FAIR),
        (56, AirQuality.INFERIOR),
        (150, AirQuality.INFERIOR),
        (151, AirQuality.POOR),
    ],
)
def test_air_quality_breakpoints(pm25, quality):
    assert air_quality_from_pm25(pm25) is quality


def test_filter_change_threshold():
    assert filter_change_from_life(19) is FilterChangeIndication.CHANGE_FILTER
    assert filter_change_from_life(20) is FilterChangeIndication.FILTER_OK
    assert filter_change_from_life(0) is FilterChangeIndication.CHANGE_FILTER


# =============================================================================
# Service graph
# =============================================================================


class TestServiceGraph:
    def test_services_in_order(self, accessory):
        names = [service.service_type for service in accessory.get_services()]
        assert names == [
            "AirPurifier",
            "AccessoryInformation",
            "AirQualitySensor",
            "FilterMaintenance",
            "Switch",
            "Switch",
            "Switch",
        ]

    def test_purifier_is_primary_and_links_the_rest(self, accessory):
        purifier_service = accessory.air_purifier_service
        assert purifier_service.primary is True
        assert purifier_service.linked_services == [
            accessory.air_quality_service,
            accessory.filter_maintenance_service,
            accessory.autofade_switch,
            accessory.beeping_switch,
            accessory.white_noise_switch,
        ]

    def test_switch_subtypes(self, accessory):
        assert [s.subtype for s in accessory.get_services()[4:]] == [
            "autofade",
            "beeping",
            "whitenoise",
        ]

    @pytest.mark.asyncio
    async def test_information_is_static(self, accessory, fake_client):
        info = accessory.information_service
        assert await info.get_characteristic("Manufacturer").get() == "The Air Lab, Inc."
        assert await info.get_characteristic("Model").get() == "Windmill Air Purifier"
        assert await info.get_characteristic("Name").get() == "Bedroom"
        assert fake_client.calls == []

    def test_get_service_by_name(self, accessory):
        assert accessory.get_service("Filter") is accessory.filter_maintenance_service
        with pytest.raises(KeyError):
            accessory.get_service("Humidifier")

    @pytest.mark.asyncio
    async def test_read_only_characteristic_rejects_set(self, accessory):
        characteristic = accessory.air_quality_service.get_characteristic("AirQuality")
        assert characteristic.writable is False
        with pytest.raises(CharacteristicNotWritable):
            await characteristic.set(AirQuality.GOOD)

    @pytest.mark.asyncio
    async def test_characteristics_invoke_hooks(self, accessory, fake_client):
        active = accessory.air_purifier_service.get_characteristic("Active")
        await active.set(Active.INACTIVE)
        assert fake_client.pins[AirPurifierPin.POWER] == "0"
        assert await active.get() is Active.INACTIVE


# =============================================================================
# Air purifier hooks
# =============================================================================


@pytest.mark.asyncio
async def test_active(accessory, fake_client):
    assert await accessory.handle_get_active() is Active.ACTIVE
    await accessory.handle_set_active(Active.INACTIVE)
    assert fake_client.pins[AirPurifierPin.POWER] == "0"
    assert await accessory.handle_get_active() is Active.INACTIVE


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "power, pm25, state",
    [
        ("0", "0", CurrentAirPurifierState.INACTIVE),
        ("0", "80", CurrentAirPurifierState.INACTIVE),
        ("1", "0", CurrentAirPurifierState.IDLE),
        ("1", "1", CurrentAirPurifierState.PURIFYING_AIR),
        ("1", "", CurrentAirPurifierState.IDLE),
    ],
)
async def test_current_state(accessory, fake_client, power, pm25, state):
    fake_client.pins[AirPurifierPin.POWER] = power
    fake_client.pins[AirPurifierPin.PM25] = pm25
    assert await accessory.handle_get_current_air_purifier_state() is state


@pytest.mark.asyncio
async def test_current_state_skips_pm25_when_off(accessory, fake_client):
    fake_client.pins[AirPurifierPin.POWER] = "0"
    await accessory.handle_get_current_air_purifier_state()
    assert fake_client.calls == [("read", AirPurifierPin.POWER)]


@pytest.mark.asyncio
async def test_target_state_auto_selects_eco(accessory, fake_client):
    assert await accessory.handle_get_target_air_purifier_state() is TargetAirPurifierState.MANUAL

    await accessory.handle_set_target_air_purifier_state(TargetAirPurifierState.AUTO)
    assert fake_client.calls[-1] == ("write", AirPurifierPin.MODE, "5")
    assert await accessory.handle_get_target_air_purifier_state() is TargetAirPurifierState.AUTO


@pytest.mark.asyncio
async def test_target_state_manual_leaves_mode_alone(accessory, fake_client):
    await accessory.handle_set_target_air_purifier_state(TargetAirPurifierState.MANUAL)
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_rotation_speed_off_reads_zero(accessory, fake_client):
    fake_client.pins[AirPurifierPin.POWER] = "0"
    assert await accessory.handle_get_rotation_speed() == 0
    assert ("read", AirPurifierPin.MODE) not in fake_client.calls


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "mode, speed",
    [("Sleep", 10), ("Low", 25), ("Eco", 40), ("Medium", 50), ("High", 75), ("Boost", 100), ("?", 50)],
)
async def test_rotation_speed_follows_mode(accessory, fake_client, mode, speed):
    fake_client.pins[AirPurifierPin.MODE] = mode
    assert await accessory.handle_get_rotation_speed() == speed


@pytest.mark.asyncio
async def test_set_rotation_speed_zero_powers_off(accessory, fake_client):
    await accessory.handle_set_rotation_speed(0)
    assert fake_client.calls == [("write", AirPurifierPin.POWER, "0")]


@pytest.mark.asyncio
async def test_set_rotation_speed_powers_on_then_sets_mode(accessory, fake_client):
    fake_client.pins[AirPurifierPin.POWER] = "0"
    await accessory.handle_set_rotation_speed(70)
    assert fake_client.calls == [
        ("read", AirPurifierPin.POWER),
        ("write", AirPurifierPin.POWER, "1"),
        ("write", AirPurifierPin.MODE, "3"),
    ]
    assert fake_client.pins[AirPurifierPin.MODE] == "High"


@pytest.mark.asyncio
async def test_set_rotation_speed_when_already_on(accessory, fake_client):
    await accessory.handle_set_rotation_speed(50)
    assert fake_client.calls == [
        ("read", AirPurifierPin.POWER),
        ("write", AirPurifierPin.MODE, "2"),
    ]
    assert fake_client.pins[AirPurifierPin.MODE] == "Medium"
    assert await accessory.handle_get_rotation_speed() == 50


@pytest.mark.asyncio
async def test_lock_physical_controls(accessory, fake_client):
    assert (
        await accessory.handle_get_lock_physical_controls()
        is LockPhysicalControls.CONTROL_LOCK_DISABLED
    )
    await accessory.handle_set_lock_physical_controls(LockPhysicalControls.CONTROL_LOCK_ENABLED)
    assert fake_client.pins[AirPurifierPin.CHILD_LOCK] == "1"
    assert (
        await accessory.handle_get_lock_physical_controls()
        is LockPhysicalControls.CONTROL_LOCK_ENABLED
    )


# =============================================================================
# Sensors and switches
# =============================================================================


@pytest.mark.asyncio
async def test_air_quality_and_density(accessory, fake_client):
    fake_client.pins[AirPurifierPin.PM25] = "36"
    assert await accessory.handle_get_air_quality() is AirQuality.FAIR
    assert await accessory.handle_get_pm25_density() == 36


@pytest.mark.asyncio
async def test_filter_maintenance(accessory, fake_client):
    fake_client.pins[AirPurifierPin.FILTER_LIFE] = "19"
    assert (
        await accessory.handle_get_filter_change_indication()
        is FilterChangeIndication.CHANGE_FILTER
    )
    assert await accessory.handle_get_filter_life_level() == 19

    fake_client.pins[AirPurifierPin.FILTER_LIFE] = "20"
    assert await accessory.handle_get_filter_change_indication() is FilterChangeIndication.FILTER_OK


@pytest.mark.asyncio
async def test_auxiliary_switches(accessory, fake_client):
    await accessory.handle_set_autofade(True)
    await accessory.handle_set_beeping(False)
    await accessory.handle_set_white_noise(True)

    assert await accessory.handle_get_autofade() is True
    assert await accessory.handle_get_beeping() is False
    assert await accessory.handle_get_white_noise() is True
    assert fake_client.pins[AirPurifierPin.SLEEP_SOUND] == "White Noise"


# =============================================================================
# Identify
# =============================================================================


@pytest.mark.asyncio
async def test_identify_toggles_and_restores_power(accessory, fake_client, mocker):
    async def record_sleep(delay):
        fake_client.calls.append(("sleep", delay))

    mocker.patch("asyncio.sleep", side_effect=record_sleep)

    await accessory.identify()

    assert fake_client.calls == [
        ("read", AirPurifierPin.POWER),
        ("write", AirPurifierPin.POWER, "0"),
        ("sleep", 3),
        ("write", AirPurifierPin.POWER, "1"),
    ]


@pytest.mark.asyncio
async def test_identify_failure_propagates(accessory, fake_client, mocker):
    mocker.patch("asyncio.sleep", side_effect=TransportError("gone"))

    with pytest.raises(TransportError):
        await accessory.identify()

    # Power was inverted but never restored
    assert fake_client.pins[AirPurifierPin.POWER] == "0"


@pytest.mark.asyncio
async def test_transport_errors_propagate_from_hooks(accessory, fake_client, mocker):
    mocker.patch.object(fake_client, "read", side_effect=TransportError("timeout"))
    with pytest.raises(TransportError):
        await accessory.handle_get_rotation_speed()


def test_accessory_uses_configured_name(accessory):
    assert isinstance(accessory, AirPurifierAccessory)
    assert accessory.name == "Bedroom"
    assert accessory.air_purifier_service.name == "Bedroom"
