# src/jgeom/cli.py
import argparse
import logging
import sys

import jax

from .main import show_geometries
from .printer import PrintOptions

logger = logging.getLogger(__name__)


def _precision(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError("precision must be at least 1")
    return n


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jgeom",
        description="Print the built-in water and formaldehyde geometries",
    )
    parser.add_argument(
        "-d",
        "--device",
        choices=["cpu", "gpu", "rocm"],
        default="cpu",
        help="Choose JAX device holding the coordinate arrays. Default: cpu",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=_precision,
        default=6,
        help="Significant digits per value. Default: 6",
    )
    parser.add_argument(
        "--no-align",
        dest="align_cols",
        action="store_false",
        help="Do not pad columns to a common width",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records here instead of stderr",
    )

    return parser.parse_args(argv)


def configure_logging(level: str = "WARNING", filename=None) -> None:
    logging.basicConfig(
        filename=filename,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s: %(message)s",
    )


def main(argv=None) -> None:

    # grab cli information
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    options = PrintOptions(precision=args.precision, align_cols=args.align_cols)
    device = jax.devices(args.device)[0]
    logger.info("Using device %s", device)

    with jax.default_device(device):
        show_geometries(sys.stdout, options)


def run(argv=None) -> int:
    """Console entry point: log any failure and return a non-zero status."""
    try:
        main(argv)
    except Exception:
        logging.exception("Failed to print geometries:")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
