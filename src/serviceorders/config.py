from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

STORAGE_MODES = ("postgres", "memory")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class DbConfig:
    host: str
    port: int
    name: str
    user: str
    password: str
    sslmode: str = "disable"
    connect_timeout: int = 5


@dataclass(frozen=True)
class WebConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False


@dataclass(frozen=True)
class AppConfig:
    name: str
    log_level: str
    storage: str
    db: Optional[DbConfig]
    web: WebConfig


def load_config(path: str | Path) -> AppConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p.resolve()}")

    try:
        data = tomllib.loads(p.read_text(encoding="utf-8"))
    except Exception as e:
        raise ConfigError(f"Failed to read config TOML: {e}") from e

    try:
        app = data["app"]
        storage = str(app.get("storage", "postgres")).lower()
        if storage not in STORAGE_MODES:
            raise ConfigError(f"Unknown storage mode {storage!r}, expected one of {STORAGE_MODES}")

        db_cfg = None
        if storage == "postgres":
            db = data["db"]
            db_cfg = DbConfig(
                host=str(db["host"]),
                port=int(db.get("port", 5432)),
                name=str(db["name"]),
                user=str(db["user"]),
                password=str(db["password"]),
                sslmode=str(db.get("sslmode", "disable")),
                connect_timeout=int(db.get("connect_timeout", 5)),
            )

        web = data.get("web", {})
        return AppConfig(
            name=str(app.get("name", "Service Orders")),
            log_level=str(app.get("log_level", "INFO")),
            storage=storage,
            db=db_cfg,
            web=WebConfig(
                host=str(web.get("host", "127.0.0.1")),
                port=int(web.get("port", 5000)),
                debug=bool(web.get("debug", False)),
            ),
        )
    except ConfigError:
        raise
    except KeyError as e:
        raise ConfigError(f"Missing config key: {e}") from e
    except Exception as e:
        raise ConfigError(f"Invalid config values: {e}") from e
