"""
ioscircles: the Inclusion of Other in Self scale.

Two circles, "self" and "other", whose overlap a respondent adjusts to say
how close they feel to someone. The package computes the overlap geometry
and drives the continuous, stepped and original variants of the scale; a
PySide6 widget draws it.
"""
from ioscircles.config import ConfigurationError, IosConfig, LayoutDirection, Mode, RadiusSolver
from ioscircles.ios import Ios
from ioscircles.model.geometry import Measurement

__all__ = [
    "ConfigurationError",
    "Ios",
    "IosConfig",
    "LayoutDirection",
    "Measurement",
    "Mode",
    "RadiusSolver",
]
