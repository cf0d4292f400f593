"""
Application Initialization
==========================
Parses the command line, builds the scale and starts the Qt event loop.

Usage:
    $ python -m ioscircles --mode stepped --circles 7
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from ioscircles.config import ConfigurationError, IosConfig, LayoutDirection, Mode, RadiusSolver
from ioscircles.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inclusion of Other in Self scale.")
    parser.add_argument(
        "--mode",
        default=Mode.CONTINUOUS.value,
        help="Scale type: continuous, stepped (step-choice) or original.",
    )
    parser.add_argument(
        "--circles",
        type=int,
        default=7,
        help="Number of circle pairs for the stepped and original scales (2-20).",
    )
    parser.add_argument(
        "--diameter",
        type=float,
        default=100.0,
        help="Initial circle diameter in pixels.",
    )
    parser.add_argument(
        "--direction",
        choices=[d.value for d in LayoutDirection],
        default=LayoutDirection.COLUMN.value,
        help="Arrangement of the pairs in the original scale.",
    )
    parser.add_argument(
        "--solver",
        choices=[s.value for s in RadiusSolver],
        default=RadiusSolver.FIT.value,
        help="Circle growth in the continuous scale: regression fit or exact root finding.",
    )
    parser.add_argument("--you", default="You", help="Label of the left circle.")
    parser.add_argument("--other", default="Other", help="Label of the right circle.")
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def config_from_args(args: argparse.Namespace) -> IosConfig:
    return IosConfig(
        mode=args.mode,
        number_circles=args.circles,
        circle_diameter=args.diameter,
        left_label=args.you,
        right_label=args.other,
        layout_direction=args.direction,
        radius_solver=args.solver,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        parser.error(str(e))

    # Qt is only needed once the configuration is known to be valid
    from ioscircles.application import create_app
    from ioscircles.view.main_window import MainWindow

    app = create_app()
    window = MainWindow(config)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
