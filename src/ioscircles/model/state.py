"""
Interaction State
=================
The mutable state of one widget instance.

Only the active controller writes to it; hosts read the published
measurement.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ioscircles.config import Mode
from ioscircles.model.geometry import Measurement


@dataclass
class InteractionState:
    mode: Mode
    measurement: Measurement

    # continuous only
    position_x: float = 0.0

    # stepped / original only; None in original mode until a pair is chosen
    current_step: Optional[int] = None
