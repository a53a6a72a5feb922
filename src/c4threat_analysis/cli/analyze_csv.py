from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ..io.load_cases import LoadSpec, load_cases, load_latest_from_dir
from ..metrics.summarize import SummaryConfig, cell_counts, evaluate_cases, orientation_counts, top_table
from ..plots.chart import plot_cell_heatmap, plot_orientation_bar


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a CSV of Connect-4 puzzles and summarize the completing moves.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a puzzles CSV. If omitted, uses latest in --cases-dir.")
    ap.add_argument("--cases-dir", type=str, default="data/cases", help="Directory containing cases_*.csv")
    ap.add_argument("--pattern", type=str, default="cases_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--out", type=str, default=None, help="Write the per-puzzle results to this CSV")
    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Disable figure generation")

    ap.add_argument("--top", type=int, default=20, help="Top N rows of the results table to print")
    ap.add_argument("--only-valid", action="store_true", help="Leave rejected boards out of the table")
    ap.add_argument("--log-level", type=str, default="WARNING", help="DEBUG, INFO, WARNING, ...")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(name)s: %(message)s")

    # Choose CSV
    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.cases_dir), pattern=args.pattern)

    df = load_cases(LoadSpec(csv_path=csv_path))
    results = evaluate_cases(df)

    print(f"\nLoaded: {csv_path}")
    print(f"Puzzles: {len(results):,}  Rejected: {int((~results['valid']).sum()):,}")

    cfg = SummaryConfig(top_n=args.top, only_valid=args.only_valid)

    print("\n=== Results ===")
    print(top_table(results, cfg).to_string(index=False))

    counts = orientation_counts(results)
    print("\n=== Puzzles per orientation ===")
    print(counts.to_string())

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(out_path, index=False)
        print(f"\nWrote results to: {out_path.resolve()}")

    if not args.no_plots:
        outdir = Path(args.outdir)
        plot_orientation_bar(counts, outdir, show=args.show)
        plot_cell_heatmap(cell_counts(results), outdir, show=args.show)
        if not args.show:
            print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
