"""
Parse a list of complex numbers, print mean/variance, optionally export a plot.

Input formats per token: 1+2i, 3-4i, 5, 6i, -i (comma, space or newline separated).

Run:
    python scripts/analyze_complex.py --text "1+2i, 3-4i, 5+0i" --outfile figures/plot.png
    python scripts/analyze_complex.py --input data/points.txt --backend figure --outfile auto
    cat data/points.txt | python scripts/analyze_complex.py
"""

import argparse
import os
import sys
from pathlib import Path

# Ensure repository root is on sys.path so `from complex_stats...` works when
# running this script directly (e.g. `python scripts/analyze_complex.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from complex_stats.config import load_plot_config
from complex_stats.figure import plot_figure
from complex_stats.pipeline import analyze
from complex_stats.render import render_plot, save_png
from complex_stats.utils import default_plot_filename, format_results, save_points_csv


def build_parser():
    parser = argparse.ArgumentParser(description="Mean, variance and plot of a list of complex numbers")
    src = parser.add_mutually_exclusive_group()
    src.add_argument("--input", type=str, help="text file with complex numbers")
    src.add_argument("--text", type=str, help="complex numbers given inline")
    parser.add_argument("--outfile", type=str, default=None,
                        help="export plot to this PNG path ('auto' -> complex_plot_<date>.png)")
    parser.add_argument("--backend", type=str, default="canvas", choices=["canvas", "figure"])
    parser.add_argument("--config", type=str, default=None, help="YAML plot settings")
    parser.add_argument("--outcsv", type=str, default=None, help="write parsed values as CSV")
    parser.add_argument("--no-mean", action="store_true", help="do not draw the mean point")
    return parser


def read_input(args) -> str:
    if args.text is not None:
        print("[run] reading inline text")
        return args.text
    if args.input is not None:
        print(f"[run] reading {args.input}")
        return Path(args.input).read_text(encoding="utf-8")
    print("[run] reading stdin")
    return sys.stdin.read()


def export_plot(result, args, cfg) -> Path:
    out_path = Path(default_plot_filename() if args.outfile == "auto" else args.outfile)
    mean = None if args.no_mean else result.statistics.mean

    if args.backend == "canvas":
        img = render_plot(result.values, mean=mean, config=cfg)
        return save_png(img, out_path)
    if args.backend == "figure":
        return plot_figure(result.values, out_path, mean=mean, config=cfg,
                           title=f"Complex plane ({result.count} points)")
    raise ValueError(f"Unknown backend: {args.backend}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    cfg = load_plot_config(args.config)
    result = analyze(read_input(args))

    if result.is_empty:
        print("No valid complex numbers found in input.", file=sys.stderr)
        return 1

    print(f"[run] parsed {result.count} complex numbers")
    print(format_results(result.statistics, count=result.count))

    try:
        if args.outcsv:
            csv_path = save_points_csv(result.values, args.outcsv)
            print(f"[run] values saved to {csv_path}")
        if args.outfile:
            out_path = export_plot(result, args, cfg)
            print(f"[run] plot saved to {out_path}")
    except (OSError, ValueError) as e:
        print(f"[run] export failed: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
