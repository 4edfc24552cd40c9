from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sized

import mysql.connector

from ..core.exceptions import QueryError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Open a connection + cursor for one unit of work.

    Commits on success, rolls back on any error. Driver errors are re-raised
    as QueryError so callers only deal with domain exceptions.
    """

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise QueryError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def placeholders(values: Sized) -> str:
    """`%s, %s, ...` for an IN (...) clause."""
    return ", ".join(["%s"] * len(values))
