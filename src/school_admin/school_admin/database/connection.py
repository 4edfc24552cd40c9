from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote, urlsplit

import mysql.connector

from ..core.exceptions import ConfigurationError, QueryError

SETUP_HINT = (
    "Missing/invalid env vars. Create `.env` from `.env.example` and set "
    "DATABASE_URL and DATABASE_KEY."
)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


def parse_database_settings(url: Optional[str], key: Optional[str]) -> DBConfig:
    """Turn `DATABASE_URL` + `DATABASE_KEY` into connector arguments.

    The URL carries host, port, user and database name
    (`mysql://user@host:3306/school_admin`); the key is the user's password.
    """

    if not url or not url.strip() or not key or not key.strip():
        raise ConfigurationError(SETUP_HINT)

    parts = urlsplit(url.strip())
    database = parts.path.lstrip("/")
    if parts.scheme not in {"mysql", "mysql+mysqlconnector"} or not parts.hostname or not database:
        raise ConfigurationError(SETUP_HINT)

    try:
        port = parts.port or 3306
    except ValueError:
        raise ConfigurationError(SETUP_HINT)

    return DBConfig(
        host=parts.hostname,
        port=int(port),
        user=unquote(parts.username or "root"),
        password=key.strip(),
        database=unquote(database),
    )


class DatabaseConnection:
    """Singleton-like DB connection factory.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    Settings are resolved on first use so a missing env var surfaces on the
    page that needed the database rather than killing the process.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, url: Optional[str], key: Optional[str]):
        self._url = url
        self._key = key
        self._config: Optional[DBConfig] = None

    @classmethod
    def get_instance(cls, url: Optional[str], key: Optional[str]) -> "DatabaseConnection":
        """Shared factory; rebuilt when called with different settings."""
        if cls._instance is None or (cls._instance._url, cls._instance._key) != (url, key):
            cls._instance = DatabaseConnection(url, key)
        return cls._instance

    @property
    def config(self) -> DBConfig:
        if self._config is None:
            self._config = parse_database_settings(self._url, self._key)
        return self._config

    def connect(self):
        config = self.config
        try:
            return mysql.connector.connect(
                host=config.host,
                port=int(config.port),
                user=config.user,
                password=config.password,
                database=config.database,
            )
        except mysql.connector.Error as e:
            raise QueryError(str(e)) from e
