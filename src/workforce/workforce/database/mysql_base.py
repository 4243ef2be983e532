from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from .connection import ConnectionFactory


@contextmanager
def read_cursor(conn_factory: ConnectionFactory) -> Iterator[Any]:
    """Dictionary cursor over a fresh connection, closed on exit."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
        finally:
            cur.close()
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
