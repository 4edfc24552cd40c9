from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import mysql.connector

from ..core.exceptions import QueryError
from .connection import DBConfig

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> int:
    count = 0
    for stmt in _iter_sql_statements(_strip_line_comments(sql)):
        cur.execute(stmt)
        count += 1
    return count


def _connect(config: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=config.host,
        port=config.port,
        user=config.user,
        password=config.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = config.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(config: DBConfig) -> None:
    conn = _connect(config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def _apply_file(config: DBConfig, path: str | Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = _connect(config)
    try:
        cur = conn.cursor()
        count = _exec_sql(cur, sql)
        conn.commit()
        return count
    finally:
        conn.close()


def apply_schema(config: DBConfig, *, schema_path: str | Path) -> None:
    try:
        ensure_database_exists(config)
        count = _apply_file(config, schema_path)
    except mysql.connector.Error as e:
        raise QueryError(f"Applying {schema_path} failed: {e}") from e
    logger.info("Applied %s statements from %s", count, schema_path)


def apply_seed_sql(config: DBConfig, *, seed_path: str | Path) -> None:
    try:
        count = _apply_file(config, seed_path)
    except mysql.connector.Error as e:
        raise QueryError(f"Applying {seed_path} failed: {e}") from e
    logger.info("Applied %s statements from %s", count, seed_path)


def list_tables(config: DBConfig) -> list[str]:
    try:
        conn = _connect(config)
    except mysql.connector.Error as e:
        raise QueryError(str(e)) from e
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    except mysql.connector.Error as e:
        raise QueryError(str(e)) from e
    finally:
        conn.close()
