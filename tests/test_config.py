import dataclasses

import pytest

from ioscircles.config import ConfigurationError, IosConfig, LayoutDirection, Mode, RadiusSolver


def test_defaults():
    config = IosConfig()
    assert config.mode == Mode.CONTINUOUS
    assert config.number_circles == 7
    assert config.circle_diameter == 100.0
    assert (config.left_label, config.right_label) == ("You", "Other")
    assert config.layout_direction == LayoutDirection.COLUMN
    assert config.radius_solver == RadiusSolver.FIT
    assert not config.uses_steps


def test_strings_are_normalised_to_enums():
    config = IosConfig(mode="original", layout_direction="row", radius_solver="exact")
    assert config.mode is Mode.ORIGINAL
    assert config.layout_direction is LayoutDirection.ROW
    assert config.radius_solver is RadiusSolver.EXACT


def test_step_choice_alias():
    assert IosConfig(mode="step-choice").mode is Mode.STEPPED


@pytest.mark.parametrize("mode", ["stepped", "original"])
@pytest.mark.parametrize("number_circles", [1, 21, 25, 0])
def test_number_circles_out_of_range(mode, number_circles):
    with pytest.raises(ConfigurationError):
        IosConfig(mode=mode, number_circles=number_circles)


@pytest.mark.parametrize("number_circles", [2, 20])
def test_number_circles_bounds_are_inclusive(number_circles):
    assert IosConfig(mode="stepped", number_circles=number_circles).number_circles == number_circles


def test_number_circles_ignored_for_continuous():
    assert IosConfig(mode="continuous", number_circles=25).number_circles == 25


def test_number_circles_must_be_integer():
    with pytest.raises(ConfigurationError):
        IosConfig(mode="stepped", number_circles=3.5)


@pytest.mark.parametrize("options", [
    {"mode": "bogus"},
    {"circle_diameter": 0},
    {"circle_diameter": -5},
    {"layout_direction": "diagonal"},
    {"radius_solver": "newton"},
    {"left_text_width": -1},
])
def test_invalid_options(options):
    with pytest.raises(ConfigurationError):
        IosConfig(**options)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        IosConfig(mode="bogus")


def test_config_is_immutable():
    config = IosConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.mode = Mode.STEPPED


def test_from_dict_accepts_browser_option_names():
    config = IosConfig.from_dict({
        "type": "step-choice",
        "numberCircles": 5,
        "circleDiameter": 80,
        "you": "Me",
        "other": "Partner",
        "buttonsClass": "btn btn-primary",
        "direction": "row",
        "leftTextWidth": 60,
    })
    assert config.mode is Mode.STEPPED
    assert config.number_circles == 5
    assert config.circle_diameter == 80
    assert (config.left_label, config.right_label) == ("Me", "Partner")
    assert config.buttons_extra_class == "btn btn-primary"
    assert config.layout_direction is LayoutDirection.ROW
    assert config.left_text_width == 60


def test_from_dict_rejects_unknown_options():
    with pytest.raises(ConfigurationError):
        IosConfig.from_dict({"colour": "red"})
