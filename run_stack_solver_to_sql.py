from typing import Any, Dict, List

import pandas as pd
from sqlalchemy import create_engine

from stack_solver import write_solution_sql, get_summary
from stack_variants import get_variant, VARIANT_NAMES

# Preset configuration values
DB_URL = "sqlite:///stack_solutions.db"
VARIANTS = list(VARIANT_NAMES)
MIN_COUNT = 0
MAX_COUNT = 5
RUNS_TABLE = "runs"


def solve_to_sql(engine, name: str, count: int) -> Dict[str, Any]:
    max_ops, solution = get_variant(name).solve(count)
    write_solution_sql(engine, f"{name}_{count}", solution)
    summary = get_summary(name, count, max_ops, solution)
    return {
        "variant": name,
        "count": count,
        "max_operations": summary["max_operations"],
        "solution_count": summary["solution_count"],
        "error": "",
    }


def run_all(engine, names: List[str], min_count: int, max_count: int) -> pd.DataFrame:
    rows = []
    for count in range(min_count, max_count + 1):
        for name in names:
            try:
                rows.append(solve_to_sql(engine, name, count))
                print(f"Done: {name}_{count}")
            except Exception as e:
                err = str(e)
                rows.append({"variant": name, "count": count, "max_operations": 0,
                             "solution_count": 0, "error": err})
                print(err)
    runs = pd.DataFrame(rows, columns=["variant", "count", "max_operations", "solution_count", "error"])
    runs.to_sql(RUNS_TABLE, engine, if_exists="replace", index=False)
    return runs


def main():
    engine = create_engine(DB_URL)
    run_all(engine, VARIANTS, MIN_COUNT, MAX_COUNT)


if __name__ == "__main__":
    main()
