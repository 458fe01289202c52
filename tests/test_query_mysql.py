from __future__ import annotations

import importlib
import os
import unittest
from typing import Any

from fluent_sql import SQL, DataSource, MySQLDialect, asc, desc


def _load_connect() -> Any:
    try:
        module = importlib.import_module("pymysql")
    except ImportError:
        return None
    return getattr(module, "connect", None)


MYSQL_CONNECT = _load_connect()
HAS_MYSQL_DRIVER = MYSQL_CONNECT is not None


@unittest.skipUnless(HAS_MYSQL_DRIVER, "pymysql is not installed")
class MySQLQueryTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        params = {
            "host": os.getenv("FLUENT_SQL_MYSQL_HOST", os.getenv("MYSQL_HOST", "localhost")),
            "port": int(os.getenv("FLUENT_SQL_MYSQL_PORT", os.getenv("MYSQL_PORT", "3306"))),
            "user": os.getenv("FLUENT_SQL_MYSQL_USER", os.getenv("MYSQL_USER", "root")),
            "password": os.getenv(
                "FLUENT_SQL_MYSQL_PASSWORD",
                os.getenv("MYSQL_ROOT_PASSWORD", os.getenv("MYSQL_PASSWORD", "password")),
            ),
        }
        database = os.getenv(
            "FLUENT_SQL_MYSQL_DATABASE", os.getenv("MYSQL_DATABASE", "fluent_sql_test")
        )

        try:
            bootstrap = MYSQL_CONNECT(**params)  # type: ignore[misc]
            cur = bootstrap.cursor()
            cur.execute(f"CREATE DATABASE IF NOT EXISTS `{database}`")
            bootstrap.commit()
            cur.close()
            bootstrap.close()
        except Exception as exc:
            raise unittest.SkipTest(
                f"MySQL is not reachable at {params['host']}:{params['port']} "
                f"with configured credentials: {exc}"
            ) from exc

        cls.sql = SQL(
            DataSource(MYSQL_CONNECT, dialect=MySQLDialect(), database=database, **params)
        )

    def setUp(self) -> None:
        self.sql.batch(
            [
                "DROP TABLE IF EXISTS fluent_person",
                "CREATE TABLE fluent_person (first_name VARCHAR(64), title VARCHAR(64))",
                "INSERT INTO fluent_person VALUES ('Joe', 'Man')",
                "INSERT INTO fluent_person VALUES ('Lucky', 'Cat')",
                "INSERT INTO fluent_person VALUES ('Max', 'Cat')",
                "INSERT INTO fluent_person VALUES ('Felix', 'Cat')",
            ]
        ).execute()

    def test_named_parameters_and_ordering(self) -> None:
        result = (
            self.sql.query("SELECT first_name FROM fluent_person WHERE title = :title")
            .parameters(title="Cat")
            .order_by(desc("first_name"))
            .execute()
            .first()
        )
        self.assertEqual(result["first_name"], "Max")

    def test_all_rows_pages_with_limit_offset(self) -> None:
        names = [
            row["first_name"]
            for row in self.sql.query("SELECT first_name FROM fluent_person")
            .order_by(asc("first_name"))
            .limit(0, 3)
            .all_rows()
            .execute()
        ]
        self.assertEqual(names, ["Felix", "Joe", "Lucky", "Max"])

    def test_like_pattern_survives_marker_conversion(self) -> None:
        rows = (
            self.sql.query("SELECT first_name FROM fluent_person WHERE first_name LIKE 'M%' AND title = ?")
            .parameters("Cat")
            .limit(0, 10)
            .execute()
            .to_list()
        )
        self.assertEqual([row["first_name"] for row in rows], ["Max"])

    def test_update_and_timeout(self) -> None:
        changed = (
            self.sql.update("UPDATE fluent_person SET title = :new WHERE title = :old")
            .parameters(new="Tiger", old="Cat")
            .query_timeout(5)
            .execute()
        )
        self.assertEqual(changed, 3)


if __name__ == "__main__":
    unittest.main()
