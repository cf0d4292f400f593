"""
IOS Scale
=========
The widget-independent entry point: configuration in, published
measurement out.

Why is this file needed?
------------------------
1. Construction: It validates the configuration, builds the pair layouts and
   picks the controller for the requested scale type.
2. Publishing: Hosts read ``distance``, ``proportion_overlap``,
   ``proportion_distance`` and ``current_circle`` from it after each input,
   or register a listener to be told when they change.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ioscircles.config import ConfigurationError, IosConfig, Mode
from ioscircles.controller.interaction import (
    Drag, InputEvent, InteractionMode, Press, Release, Step, StepDirection,
    create_controller, layouts_for
)
from ioscircles.model.geometry import Measurement
from ioscircles.model.layout import PairLayout

logger = logging.getLogger(__name__)

Listener = Callable[[Measurement], None]


class Ios:
    """
    Inclusion of Other in Self scale.

    Args:
        config: Validated configuration. Keyword options are accepted instead
            and go through ``IosConfig.from_dict``.

    Raises:
        ConfigurationError: For invalid options. Nothing is left usable.
    """

    def __init__(self, config: Optional[IosConfig] = None, **options: Any) -> None:
        try:
            if config is None:
                config = IosConfig.from_dict(options)
            elif options:
                raise ConfigurationError("Pass either a config or keyword options, not both.")
        except ConfigurationError as e:
            logger.error(f"Invalid IOS configuration: {e}")
            raise

        self.config: IosConfig = config
        self.layouts: list[PairLayout] = layouts_for(config)
        self.controller: InteractionMode = create_controller(config, self.layouts)
        self._listeners: list[Listener] = []

        logger.info(
            f"IOS scale created: mode={config.mode.value}, diameter={config.circle_diameter:g}"
            + (f", pairs={config.number_circles}" if config.uses_steps else "")
        )

    # ---- published state ----

    @property
    def mode(self) -> Mode:
        return self.config.mode

    @property
    def measurement(self) -> Measurement:
        return self.controller.measurement

    @property
    def distance(self) -> float:
        return self.measurement.distance

    @property
    def proportion_overlap(self) -> float:
        return self.measurement.proportion_overlap

    @property
    def proportion_distance(self) -> float:
        return self.measurement.proportion_distance

    @property
    def current_circle(self) -> Optional[int]:
        return self.controller.state.current_step if self.config.uses_steps else None

    # ---- listeners ----

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # ---- input ----

    def handle_input(self, event: InputEvent) -> bool:
        changed = self.controller.handle_input(event)
        if changed:
            measurement = self.measurement
            for listener in list(self._listeners):
                listener(measurement)
        return changed

    def drag(self, dx: float) -> bool:
        return self.handle_input(Drag(dx))

    def next(self) -> bool:
        return self.handle_input(Step(StepDirection.NEXT))

    def previous(self) -> bool:
        return self.handle_input(Step(StepDirection.PREVIOUS))

    def press(self, pair: int) -> bool:
        return self.handle_input(Press(pair))

    def release(self, pair: Optional[int]) -> bool:
        return self.handle_input(Release(pair))
