from __future__ import annotations

import logging
import sys

from serviceorders.cli import run_cli
from serviceorders.config import ConfigError, load_config
from serviceorders.db import Db, DbError
from serviceorders.logging_config import setup_logging
from serviceorders.wiring import build_services

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    config_path = args[0] if args else "config.toml"
    try:
        cfg = load_config(config_path)
        setup_logging(cfg.log_level)
        services = build_services(cfg)
        if isinstance(services.db, Db):
            services.db.apply_schema()
        logger.info("Starting %s (storage=%s)", cfg.name, cfg.storage)
        run_cli(services)
        return 0
    except ConfigError as e:
        print(f"[CONFIG ERROR] {e}")
        return 2
    except DbError as e:
        print(f"[DB ERROR] {e}")
        return 3
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
