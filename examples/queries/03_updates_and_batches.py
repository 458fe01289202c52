"""Updates, batches, and batch scripts with fluent_sql."""

from __future__ import annotations

import io
import sqlite3
import sys
import tempfile
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "fluent_sql").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fluent_sql import SQL, BatchExecutionError, DataSource, SQLiteDialect

SCRIPT = """
CREATE TABLE account (name TEXT, balance INTEGER)
INSERT INTO account VALUES ('alice', 100)
INSERT INTO account VALUES ('bob', 50)
"""


def main() -> None:
    with tempfile.TemporaryDirectory() as workdir:
        path = str(Path(workdir) / "bank.db")
        sql = SQL(DataSource(sqlite3.connect, path, dialect=SQLiteDialect()))

        # 1) One statement per non-blank line.
        print("Script rows:", sql.batch_from(io.StringIO(SCRIPT)).execute())

        # 2) Updates return the affected-row count.
        moved = (
            sql.update("UPDATE account SET balance = balance + :amount WHERE name = :name")
            .parameters(amount=25, name="bob")
            .execute()
        )
        print("Updated rows:", moved)

        # 3) With autocommit off, a failing batch is rolled back as a unit.
        manual = SQL(DataSource(sqlite3.connect, path, dialect=SQLiteDialect(), autocommit=False))
        try:
            manual.batch(
                [
                    "UPDATE account SET balance = 0",
                    "UPDATE missing SET balance = 0",
                ]
            ).execute()
        except BatchExecutionError as exc:
            print(f"Statement {exc.index} failed after {exc.count} rows: {exc}")

        for row in sql.query("SELECT name, balance FROM account").limit(0, 10).execute():
            print(row["name"], row["balance"])


if __name__ == "__main__":
    main()
