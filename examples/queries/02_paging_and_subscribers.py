"""Windowed paging, subscribers, and cancellation with fluent_sql."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "fluent_sql").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fluent_sql import SQL, Result, Subscriber, asc, data_source_from_url


class FirstN(Subscriber):
    """Prints results and cancels after `limit` of them."""

    def __init__(self, limit: int) -> None:
        super().__init__()
        self.limit = limit
        self.seen = 0

    def on_next(self, result: Result) -> None:
        self.seen += 1
        print("  got", result["n"])
        if self.seen >= self.limit:
            self.cancel()

    def on_completed(self) -> None:
        print("  completed")


def main() -> None:
    # Show the per-window debug lines emitted by fluent_sql.
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # 1) `sqlite://` gives each checkout a private in-memory database, so
    #    use a view over a recursive CTE that needs no stored rows.
    sql = SQL(data_source_from_url("sqlite://"))
    numbers = (
        "WITH RECURSIVE seq(n) AS (SELECT 1 UNION ALL SELECT n + 1 FROM seq WHERE n < 25) "
        "SELECT n FROM seq"
    )

    # 2) all_rows() re-issues the query in windows of 10 until a short page.
    rows = sql.query(numbers).order_by(asc("n")).limit(0, 10).all_rows().execute().to_list()
    print("Fetched", len(rows), "rows")

    # 3) A subscriber can cancel; no further windows are requested.
    print("Cancelling after 12:")
    sql.query(numbers).order_by(asc("n")).limit(0, 10).all_rows().execute().subscribe(FirstN(12))

    # 4) Errors arrive once through on_error; on_completed is not called.
    sql.query("SELECT * FROM missing_table").execute().subscribe(
        lambda result: print("unexpected", result),
        on_error=lambda error: print("Error:", error),
        on_completed=lambda: print("never printed"),
    )


if __name__ == "__main__":
    main()
