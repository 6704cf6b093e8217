
import argparse, os
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import List, Tuple

import pandas as pd

from stack_solver import save_report_txt, save_solution_to_csv, save_summary_json, get_summary
from stack_variants import get_variant, VARIANT_NAMES


def build_work_items(min_count: int, max_count: int, names: List[str]) -> List[Tuple[int, str]]:
    # Smaller problems first; within one size, registry order.
    return [(count, name) for count in range(min_count, max_count + 1) for name in names]


def do_work(count: int, name: str, out_dir: str) -> str:
    """
    Solve one (variant, count) pair and write its CSV, summary and report.

    On failure any partial outputs are removed and a one-row error CSV plus an error
    summary are written instead.  Returns a status string ("success" or the failure
    message).
    """
    out = Path(out_dir)
    stem = f"{name}_{count}"
    csv_path = out / f"{stem}.csv"
    summary_path = out / f"{stem}_summary.json"
    report_path = out / f"{stem}.txt"
    try:
        max_ops, solution = get_variant(name).solve(count)
        save_solution_to_csv(csv_path, solution)
        save_summary_json(summary_path, get_summary(name, count, max_ops, solution))
        # The report goes last: a .txt on disk means the job finished.
        save_report_txt(report_path, max_ops, solution)
        status = "success"
        print(f"Done: {stem}")
    except Exception as e:
        err = str(e)
        status = f"failure: {err}"
        for partial in (csv_path, summary_path, report_path):
            partial.unlink(missing_ok=True)
        out.mkdir(parents=True, exist_ok=True)
        err_df = pd.DataFrame([
            {
                "stack": "",
                "left": "",
                "operations": "",
                "operation_count": 0,
                "error": err,
            }
        ])
        err_df.to_csv(csv_path, index=False)
        save_summary_json(summary_path, {"variant": name, "count": count, "error": err})
        print(f"{stem}: {err}")
    return status


def run_all(work_items: List[Tuple[int, str]], out_dir: str, jobs: int) -> List[str]:
    if jobs <= 1:
        return [do_work(count, name, out_dir) for count, name in work_items]
    with ProcessPoolExecutor(max_workers=jobs) as ex:
        futures = [ex.submit(do_work, count, name, out_dir) for count, name in work_items]
        return [f.result() for f in futures]


def main():
    ap = argparse.ArgumentParser(description="Enumerate optimal two-stack solutions for every variant and size.")
    ap.add_argument("--min-count", type=int, default=0, help="Smallest number of labels (default 0).")
    ap.add_argument("--max-count", type=int, default=6, help="Largest number of labels (default 6).")
    ap.add_argument("--variants", nargs="+", choices=VARIANT_NAMES, default=VARIANT_NAMES,
                    help="Variants to solve (default: all).")
    ap.add_argument("--jobs", type=int, default=os.cpu_count() or 1,
                    help="Worker processes; 1 solves in-process (default: CPU count).")
    ap.add_argument("--out", default="generated", help="Output directory (default 'generated').")
    args = ap.parse_args()

    if args.min_count < 0 or args.max_count < args.min_count:
        ap.error("--min-count must be >= 0 and not larger than --max-count")

    work_items = build_work_items(args.min_count, args.max_count, args.variants)
    statuses = run_all(work_items, args.out, args.jobs)
    failed = [s for s in statuses if s != "success"]
    if failed:
        print(f"{len(failed)} of {len(statuses)} jobs failed")

if __name__ == "__main__":
    main()
