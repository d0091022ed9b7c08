"""hannwin CLI - Hann window generation tool."""
from __future__ import annotations
import argparse
import sys
from pathlib import Path

import numpy as np

from hannwin.version import __version__
from hannwin.types import HannWindowError, WindowSummary
from hannwin.api import get_hann_window, get_hann_window_sum_squares
from hannwin.cache import default_sum_squares_cache, default_window_cache
from hannwin.dsp.windowing import WINDOW_DTYPE, window_power_norm
from hannwin.utils.canonical_json import canonical_dumps
from hannwin.utils.quantize import quantize_coefficients


EXIT_OK = 0
EXIT_BAD_ARGS = 2
EXIT_WINDOW_ERROR = 3
EXIT_INTERNAL_ERROR = 5


def _summarize(w: np.ndarray) -> WindowSummary:
    """Build summary figures for a window served by the public accessors."""
    length = int(len(w))
    return WindowSummary(
        length=length,
        sum_squares=get_hann_window_sum_squares(w),
        power_norm=window_power_norm(w),
        cached=length in default_window_cache(),
    )


def _build_window_dict(w: np.ndarray, *, precision: float | None = None) -> dict:
    summary = _summarize(w)
    coefficients = (
        quantize_coefficients(w, precision) if precision else w
    )
    return {
        "length": summary.length,
        "dtype": np.dtype(WINDOW_DTYPE).name,
        "sum_squares": summary.sum_squares,
        "power_norm": summary.power_norm,
        "cached": summary.cached,
        "coefficients": coefficients,
    }


def cmd_window(args) -> int:
    """Handle window command."""
    try:
        w = get_hann_window(args.length)
        if args.format == "json":
            text = canonical_dumps(
                _build_window_dict(w, precision=args.precision)
            )
        else:
            values = (
                quantize_coefficients(w, args.precision)
                if args.precision else [float(v) for v in w]
            )
            text = "\n".join(repr(v) for v in values)

        if args.out:
            out_path = Path(args.out)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(text + "\n", encoding="utf-8")
        else:
            print(text)
        return EXIT_OK

    except HannWindowError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_WINDOW_ERROR
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


def cmd_sum_squares(args) -> int:
    """Handle sum-squares command."""
    try:
        w = get_hann_window(args.length)
        print(repr(get_hann_window_sum_squares(w)))
        return EXIT_OK

    except HannWindowError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_WINDOW_ERROR
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


def cmd_inspect_cache(args) -> int:
    """Handle inspect-cache command."""
    try:
        cache = default_window_cache()
        sums = default_sum_squares_cache().table

        print(f"Precomputed lengths: {len(cache)}")
        for length in cache.lengths:
            print(f"  {length}: sum_squares={sums[length]:.6f}")
        return EXIT_OK

    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


def _positive_step(value: str) -> float:
    step = float(value)
    if step <= 0:
        raise argparse.ArgumentTypeError("precision must be positive")
    return step


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="hannwin",
        description="hannwin - Hann window generation tool"
    )
    parser.add_argument(
        "--version", action="version",
        version=f"hannwin {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # window command
    window_parser = subparsers.add_parser(
        "window",
        help="Print or write a Hann window"
    )
    window_parser.add_argument(
        "length",
        type=int,
        help="Window length (2 to 16777216)"
    )
    window_parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )
    window_parser.add_argument(
        "--out", "-o",
        help="Output path (default: stdout)"
    )
    window_parser.add_argument(
        "--precision",
        type=_positive_step,
        help="Quantize coefficients to this step (e.g. 1e-6)"
    )
    window_parser.set_defaults(func=cmd_window)

    # sum-squares command
    sum_parser = subparsers.add_parser(
        "sum-squares",
        help="Print the sum of squares of a Hann window"
    )
    sum_parser.add_argument(
        "length",
        type=int,
        help="Window length (2 to 16777216)"
    )
    sum_parser.set_defaults(func=cmd_sum_squares)

    # inspect-cache command
    inspect_parser = subparsers.add_parser(
        "inspect-cache",
        help="List precomputed window lengths"
    )
    inspect_parser.set_defaults(func=cmd_inspect_cache)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(EXIT_BAD_ARGS)


if __name__ == "__main__":
    main()
