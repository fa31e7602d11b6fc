from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

import psycopg
from psycopg import Connection
from psycopg.conninfo import make_conninfo

from .config import DbConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")


class DbError(Exception):
    pass


@dataclass(frozen=True)
class Db:
    cfg: DbConfig

    @property
    def conninfo(self) -> str:
        return make_conninfo(
            host=self.cfg.host,
            port=self.cfg.port,
            dbname=self.cfg.name,
            user=self.cfg.user,
            password=self.cfg.password,
            sslmode=self.cfg.sslmode,
            connect_timeout=self.cfg.connect_timeout,
        )

    def connect(self) -> Connection:
        try:
            return psycopg.connect(self.conninfo)
        except psycopg.OperationalError as e:
            logger.error("Connection to %s:%s failed: %s", self.cfg.host, self.cfg.port, e)
            raise DbError(
                "Cannot connect to database. Check config.toml [db] and that PostgreSQL is running."
            ) from e

    @contextmanager
    def session(self) -> Iterator[Connection]:
        """Read-only work; the connection is closed on exit."""
        conn = self.connect()
        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Commit when the block succeeds, roll back when it raises."""
        with self.connect() as conn:
            with conn.transaction():
                yield conn

    def apply_schema(self) -> None:
        with self.transaction() as conn:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
        logger.info("Schema applied to database %s", self.cfg.name)
