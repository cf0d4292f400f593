"""
Widget Configuration
====================
Options a widget is constructed with. They are validated once and are
immutable afterwards.

Exports:
    Mode, LayoutDirection, RadiusSolver: Enumerated option values.
    IosConfig: The validated configuration.
    ConfigurationError: Raised for any invalid option.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)

MIN_CIRCLES: int = 2
MAX_CIRCLES: int = 20


class ConfigurationError(ValueError):
    """Invalid widget configuration. The widget must be rebuilt with valid options."""


class Mode(StrEnum):
    CONTINUOUS = "continuous"
    STEPPED = "stepped"
    ORIGINAL = "original"

    @classmethod
    def parse(cls, value: str | Mode) -> Mode:
        if isinstance(value, Mode):
            return value
        if value == "step-choice":
            return cls.STEPPED
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f"mode needs to be 'continuous', 'stepped' ('step-choice') or 'original', got {value!r}"
            ) from None


class LayoutDirection(StrEnum):
    COLUMN = "column"
    ROW = "row"


class RadiusSolver(StrEnum):
    """How the continuous scale grows the circles while dragging."""
    FIT = "fit"
    EXACT = "exact"


def _parse_enum(enum_cls: type[StrEnum], value: Any, option: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(repr(v.value) for v in enum_cls)
        raise ConfigurationError(f"{option} needs to be one of {allowed}, got {value!r}") from None


# Option names used by the browser widget
_ALIASES: dict[str, str] = {
    "type": "mode",
    "numberCircles": "number_circles",
    "circleDiameter": "circle_diameter",
    "you": "left_label",
    "other": "right_label",
    "leftLabel": "left_label",
    "rightLabel": "right_label",
    "buttonsClass": "buttons_extra_class",
    "buttonsExtraClass": "buttons_extra_class",
    "direction": "layout_direction",
    "layoutDirection": "layout_direction",
    "leftTextWidth": "left_text_width",
    "rightTextWidth": "right_text_width",
    "radiusSolver": "radius_solver",
}


@dataclass(frozen=True)
class IosConfig:
    mode: Mode = Mode.CONTINUOUS
    number_circles: int = 7
    circle_diameter: float = 100.0
    left_label: str = "You"
    right_label: str = "Other"
    buttons_extra_class: str = ""
    layout_direction: LayoutDirection = LayoutDirection.COLUMN
    left_text_width: float = 40.0
    right_text_width: float = 40.0
    radius_solver: RadiusSolver = RadiusSolver.FIT

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "mode", Mode.parse(self.mode))
        object.__setattr__(self, "layout_direction", _parse_enum(LayoutDirection, self.layout_direction, "layout_direction"))
        object.__setattr__(self, "radius_solver", _parse_enum(RadiusSolver, self.radius_solver, "radius_solver"))
        self._validate()

    def _validate(self) -> None:
        if self.uses_steps:
            if isinstance(self.number_circles, bool) or not isinstance(self.number_circles, int):
                raise ConfigurationError(f"number_circles must be an integer, got {self.number_circles!r}")
            if not MIN_CIRCLES <= self.number_circles <= MAX_CIRCLES:
                raise ConfigurationError(
                    f"number_circles needs to be between {MIN_CIRCLES} and {MAX_CIRCLES} "
                    f"(both included), got {self.number_circles}"
                )
        if not self.circle_diameter > 0:
            raise ConfigurationError(f"circle_diameter must be positive, got {self.circle_diameter!r}")
        if self.left_text_width < 0 or self.right_text_width < 0:
            raise ConfigurationError("Text widths cannot be negative.")

    @property
    def uses_steps(self) -> bool:
        return self.mode in (Mode.STEPPED, Mode.ORIGINAL)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> IosConfig:
        """
        Build a configuration from keyword options.

        Accepts the field names as well as the browser widget's option names
        (``numberCircles``, ``you``, ``buttonsClass``, ...).
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown option {key!r}.")
            kwargs[name] = value
        return cls(**kwargs)
