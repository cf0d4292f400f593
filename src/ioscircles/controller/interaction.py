"""
Interaction Controllers
=======================
One controller per scale type. Each turns raw input into new circle geometry
and republishes the measurement read back from that geometry.

    ContinuousController  - the left circle is dragged; circles grow as they merge
    SteppedController     - previous/next buttons walk through calibrated pairs
    OriginalController    - all pairs are shown at once; a click selects one

Controllers share the ``InteractionMode`` protocol, so the widget drives
whichever one is active through ``handle_input``. All work happens
synchronously inside the input callback.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Callable, Optional, Protocol, Sequence, Union

from ioscircles.config import IosConfig, Mode, RadiusSolver
from ioscircles.model.calibration import CalibrationPoint, pair_calibration, place_step, scale_factor
from ioscircles.model.geometry import Measurement, exact_diameter, fitted_diameter, measure
from ioscircles.model.layout import PairLayout, Side
from ioscircles.model.state import InteractionState
from ioscircles.utils import clamp, round_half_up

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Input events
# ------------------------------------------------------------------------------

class StepDirection(StrEnum):
    NEXT = "next"
    PREVIOUS = "previous"


@dataclass(frozen=True)
class Drag:
    """Horizontal pointer movement since the previous move event, in pixels."""
    dx: float


@dataclass(frozen=True)
class Step:
    direction: StepDirection


@dataclass(frozen=True)
class Press:
    """Pointer pressed over pair ``pair`` (1-indexed)."""
    pair: int


@dataclass(frozen=True)
class Release:
    """Pointer released over pair ``pair``, or outside every pair (None)."""
    pair: Optional[int] = None


InputEvent = Union[Drag, Step, Press, Release]


class Renderer(Protocol):
    """What a controller needs from the thing drawing a circle pair."""
    diameter: float

    def center_x(self, side: Side) -> float: ...
    def set_diameter(self, px: float) -> None: ...
    def translate_left_group(self, px: float) -> None: ...
    def set_right_margin(self, px: float) -> None: ...


class InteractionMode(Protocol):
    state: InteractionState

    @property
    def measurement(self) -> Measurement: ...

    def handle_input(self, event: InputEvent) -> bool:
        """Apply an input event. Returns True if the published state changed."""
        ...


# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------

def read_measurement(renderer: Renderer, initial_diameter: float) -> Measurement:
    """Measure distance and overlap from the rendered circles."""
    distance = renderer.center_x(Side.RIGHT) - renderer.center_x(Side.LEFT)
    return measure(renderer.diameter, distance, initial_diameter)


def apply_calibration(
    renderer: Renderer,
    point: CalibrationPoint,
    initial_diameter: float,
    start_margin: float
) -> None:
    """
    Move the left circle and resize both circles to a calibration point.

    The right group's margin shrinks by half the growth so that the right
    circle appears to stay in place.
    """
    placement = place_step(point, initial_diameter)
    renderer.translate_left_group(placement.group_translation)
    renderer.set_diameter(placement.diameter)
    renderer.set_right_margin(placement.right_margin(start_margin))


def _unsupported(controller: object, event: object) -> TypeError:
    return TypeError(f"{type(controller).__name__} cannot handle {type(event).__name__} events.")


# ------------------------------------------------------------------------------
# Continuous
# ------------------------------------------------------------------------------

class ContinuousController:
    """
    Drag the left circle towards the right one.

    As the circles move together both grow, so that the area they cover stays
    about constant and the overlap increases about linearly with the drag.
    """

    def __init__(self, layout: PairLayout, radius_solver: RadiusSolver = RadiusSolver.FIT) -> None:
        self.layout = layout
        self.radius_solver = radius_solver

        self.start_diameter: float = layout.circle_diameter
        self.start_right_margin: float = layout.start_right_margin
        self.scale: float = scale_factor(self.start_diameter)
        self.max_drag: float = layout.max_drag

        self.state = InteractionState(
            mode=Mode.CONTINUOUS,
            measurement=read_measurement(layout, self.start_diameter),
            position_x=0.0,
        )
        logger.debug(f"Continuous scale ready (max drag {self.max_drag:.2f} px).")

    @property
    def measurement(self) -> Measurement:
        return self.state.measurement

    @property
    def position_x(self) -> float:
        return self.state.position_x

    def target_diameter(self, distance: float) -> int:
        """Diameter keeping the covered area constant at the given distance."""
        if self.radius_solver == RadiusSolver.EXACT:
            diameter = exact_diameter(distance, self.start_diameter)
        else:
            diameter = fitted_diameter(distance, self.scale)
        return round_half_up(diameter)

    def drag(self, dx: float) -> bool:
        position = clamp(self.state.position_x + dx, 0.0, self.max_drag)
        if position == self.state.position_x:
            return False
        self.state.position_x = position

        # move the draggable circle
        self.layout.translate_left_group(position)
        distance = self.layout.distance()

        # grow both circles, never below the start size
        new_diameter = max(self.target_diameter(distance), self.start_diameter)
        self.layout.set_diameter(new_diameter)

        # shift the margin of the fixed circle so that it appears to remain in place
        shift_margin = new_diameter / 2 - self.start_diameter / 2
        self.layout.set_right_margin(round_half_up(self.start_right_margin - shift_margin))

        self.state.measurement = read_measurement(self.layout, self.start_diameter)
        logger.debug(
            f"Drag to {position:.2f} px: diameter {new_diameter}, "
            f"overlap {self.state.measurement.proportion_overlap:.3f}"
        )
        return True

    def handle_input(self, event: InputEvent) -> bool:
        if isinstance(event, Drag):
            return self.drag(event.dx)
        raise _unsupported(self, event)


# ------------------------------------------------------------------------------
# Stepped
# ------------------------------------------------------------------------------

class SteppedController:
    """Previous/next navigation through ``number_circles`` calibrated pairs."""

    def __init__(self, layout: PairLayout, number_circles: int) -> None:
        self.layout = layout
        self.number_circles = number_circles
        self.points = pair_calibration(number_circles)

        self.start_diameter: float = layout.circle_diameter
        self.start_right_margin: float = layout.start_right_margin

        self.state = InteractionState(
            mode=Mode.STEPPED,
            measurement=read_measurement(layout, self.start_diameter),
            current_step=1,
        )
        self._shift_and_report()

    @property
    def measurement(self) -> Measurement:
        return self.state.measurement

    @property
    def current_step(self) -> int:
        return self.state.current_step

    def _shift_and_report(self) -> None:
        step = self.state.current_step
        apply_calibration(self.layout, self.points[step - 1], self.start_diameter, self.start_right_margin)
        self.state.measurement = read_measurement(self.layout, self.start_diameter).with_circle(step)
        logger.debug(f"Step {step}/{self.number_circles}: {self.state.measurement}")

    def next(self) -> bool:
        if self.state.current_step >= self.number_circles:
            return False
        self.state.current_step += 1
        self._shift_and_report()
        return True

    def previous(self) -> bool:
        if self.state.current_step <= 1:
            return False
        self.state.current_step -= 1
        self._shift_and_report()
        return True

    def handle_input(self, event: InputEvent) -> bool:
        if isinstance(event, Step):
            return self.next() if event.direction == StepDirection.NEXT else self.previous()
        raise _unsupported(self, event)


# ------------------------------------------------------------------------------
# Original
# ------------------------------------------------------------------------------

class OriginalController:
    """
    All pairs drawn side by side; the respondent picks one.

    Each pair is placed and measured once at construction. A selection only
    looks up the cached measurement.
    """

    def __init__(self, layouts: Sequence[PairLayout], number_circles: int) -> None:
        if len(layouts) != number_circles:
            raise ValueError(f"Expected {number_circles} pair layouts, got {len(layouts)}.")

        self.layouts = tuple(layouts)
        self.number_circles = number_circles
        self.points = pair_calibration(number_circles)

        first = self.layouts[0]
        self.start_diameter: float = first.circle_diameter
        initial = read_measurement(first, self.start_diameter)

        reports: list[Measurement] = []
        for pair, (layout, point) in enumerate(zip(self.layouts, self.points), start=1):
            apply_calibration(layout, point, self.start_diameter, layout.start_right_margin)
            reports.append(read_measurement(layout, self.start_diameter).with_circle(pair))
        self.pair_measurements: tuple[Measurement, ...] = tuple(reports)

        self._pressed: Optional[int] = None
        self.state = InteractionState(mode=Mode.ORIGINAL, measurement=initial, current_step=None)
        logger.debug(f"Original scale ready with {number_circles} pairs.")

    @property
    def measurement(self) -> Measurement:
        return self.state.measurement

    @property
    def current_step(self) -> Optional[int]:
        return self.state.current_step

    def _check_pair(self, pair: int) -> None:
        if not 1 <= pair <= self.number_circles:
            raise IndexError(f"Pair {pair} out of range [1, {self.number_circles}].")

    def select(self, pair: int) -> bool:
        self._check_pair(pair)
        changed = self.state.current_step != pair
        self.state.current_step = pair
        self.state.measurement = self.pair_measurements[pair - 1]
        logger.debug(f"Selected pair {pair}: {self.state.measurement}")
        return changed

    def press(self, pair: int) -> None:
        self._check_pair(pair)
        self._pressed = pair

    def release(self, pair: Optional[int]) -> bool:
        """Complete a click. Releasing anywhere but over the pressed pair cancels it."""
        pressed, self._pressed = self._pressed, None
        if pressed is None or pair != pressed:
            return False
        return self.select(pair)

    def handle_input(self, event: InputEvent) -> bool:
        if isinstance(event, Press):
            self.press(event.pair)
            return False
        if isinstance(event, Release):
            return self.release(event.pair)
        raise _unsupported(self, event)


# ------------------------------------------------------------------------------
# Factory
# ------------------------------------------------------------------------------

_FACTORIES: dict[Mode, Callable[[IosConfig, Sequence[PairLayout]], InteractionMode]] = {
    Mode.CONTINUOUS: lambda config, layouts: ContinuousController(layouts[0], config.radius_solver),
    Mode.STEPPED: lambda config, layouts: SteppedController(layouts[0], config.number_circles),
    Mode.ORIGINAL: lambda config, layouts: OriginalController(layouts, config.number_circles),
}


def layouts_for(config: IosConfig) -> list[PairLayout]:
    """One layout per rendered pair: N for the original scale, one otherwise."""
    count = config.number_circles if config.mode == Mode.ORIGINAL else 1
    return [
        PairLayout(
            circle_diameter=config.circle_diameter,
            left_text_width=config.left_text_width,
            right_text_width=config.right_text_width,
        )
        for _ in range(count)
    ]


def create_controller(config: IosConfig, layouts: Sequence[PairLayout]) -> InteractionMode:
    return _FACTORIES[config.mode](config, layouts)
