import pytest

from robarm.config import GripperType, default_config, ftobler_original_config
from robarm.presets import preset, preset_names, v031_config, v041_config, v051_config


def test_v031_pins_source_constants():
    config = v031_config()
    assert config.end_effector_offset == 55.0
    assert (config.x_home_steps, config.y_home_steps, config.z_home_steps) == (765, 1750, 3721)
    assert config.z_min == -125.0


def test_v041_home_steps_from_source():
    config = v041_config()
    assert (config.x_home_steps, config.y_home_steps, config.z_home_steps) == (765, 1940, 3600)
    assert config.gripper is GripperType.BYJ


def test_v051_uses_servo_gripper():
    config = v051_config()
    assert config.gripper is GripperType.SERVO
    assert config.low_shank_length == config.high_shank_length == 120.0
    assert (config.x_home_steps, config.y_home_steps) == (820, 1850)


@pytest.mark.parametrize("factory", [v031_config, v041_config, v051_config])
def test_reach_and_height_invariants(factory):
    config = factory()
    assert 0 < config.r_min < config.r_max
    assert config.z_max == config.low_shank_length + config.z_max_margin
    assert config.z_min < 0 < config.z_max


@pytest.mark.parametrize("factory", [v031_config, v041_config, v051_config])
def test_initial_position_forms_right_angle(factory):
    config = factory()
    x, y, z, e = config.initial_position
    assert y == config.high_shank_length + config.end_effector_offset
    assert z == config.low_shank_length
    assert (x, e) == (config.initial_x, config.initial_e0)


def test_preset_lookup_matches_factories():
    assert preset("v0.31") == v031_config()
    assert preset("v0.41") == v041_config()
    assert preset("v0.51") == v051_config()
    assert preset("v0.61") == default_config()
    assert preset("ftobler_original") == ftobler_original_config()


def test_preset_names_sorted_and_resolvable():
    names = preset_names()
    assert list(names) == sorted(names)
    assert {"v0.31", "v0.41", "v0.51", "v0.61"} <= set(names)
    for name in names:
        assert preset(name).queue_size >= 1


def test_unknown_preset_raises():
    with pytest.raises(ValueError, match="unknown preset"):
        preset("v9.99")


def test_presets_return_independent_equal_values():
    assert v051_config() == v051_config()
    assert v041_config() != v051_config()