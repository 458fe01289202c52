"""Basic fluent_sql query example over a file-backed SQLite database."""

from __future__ import annotations

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

from fluent_sql import SQL, DataSource, SQLiteDialect, desc


def main() -> None:
    with tempfile.TemporaryDirectory() as workdir:
        # 1) Every checkout opens a fresh connection to the same file.
        sql = SQL(DataSource(sqlite3.connect, str(Path(workdir) / "people.db"), dialect=SQLiteDialect()))

        # 2) Create and fill tables with a batch.
        sql.batch(
            [
                "CREATE TABLE person (first TEXT, last TEXT, title TEXT)",
                "CREATE TABLE title (title TEXT, description TEXT)",
                "INSERT INTO title VALUES ('Man', 'I am a man')",
                "INSERT INTO title VALUES ('Cat', 'I am a cat')",
                "INSERT INTO person VALUES ('Joe', 'Smith', 'Man')",
                "INSERT INTO person VALUES ('Lucky', 'Black', 'Cat')",
                "INSERT INTO person VALUES ('Max', 'White', 'Cat')",
            ]
        ).execute()

        # 3) Named parameters; only the first row is fetched by default.
        top_cat = (
            sql.query("SELECT first AS x, last AS y FROM person WHERE title = :title")
            .parameters(title="Cat")
            .order_by(desc("x"))
            .execute()
            .first()
        )
        print("First cat:", top_cat)

        # 4) Positional parameters.
        lucky = (
            sql.query(
                "SELECT description FROM title, person "
                "WHERE person.first = ? AND person.title = title.title"
            )
            .parameters("Lucky")
            .execute()
            .first()
        )
        print("Lucky says:", lucky["description"])

        # 5) Feed one result into the next query's named parameters.
        titles = sql.query("SELECT description FROM title WHERE title = :title")
        for person in sql.query("SELECT first, title FROM person").limit(0, 10).all_rows().execute():
            print(person["first"], "->", titles.parameters(person).execute().first()["description"])


if __name__ == "__main__":
    main()
