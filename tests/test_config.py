"""Tests for TOML configuration loading"""

import pytest

from serviceorders.config import ConfigError, load_config


def _write(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_postgres_config(tmp_path):
    path = _write(
        tmp_path,
        """
[app]
name = "Orders"
log_level = "DEBUG"

[db]
host = "db.local"
name = "orders"
user = "svc"
password = "secret"

[web]
port = 8080
""",
    )

    cfg = load_config(path)

    assert cfg.name == "Orders"
    assert cfg.log_level == "DEBUG"
    assert cfg.storage == "postgres"
    assert cfg.db.host == "db.local"
    assert cfg.db.port == 5432
    assert cfg.db.sslmode == "disable"
    assert cfg.db.connect_timeout == 5
    assert cfg.web.port == 8080
    assert cfg.web.host == "127.0.0.1"


def test_memory_storage_does_not_need_db_section(tmp_path):
    path = _write(tmp_path, '[app]\nstorage = "memory"\n')

    cfg = load_config(path)

    assert cfg.storage == "memory"
    assert cfg.db is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.toml")


def test_missing_db_key_raises(tmp_path):
    path = _write(tmp_path, '[app]\nname = "x"\n\n[db]\nhost = "h"\n')

    with pytest.raises(ConfigError, match="Missing config key"):
        load_config(path)


def test_unknown_storage_raises(tmp_path):
    path = _write(tmp_path, '[app]\nstorage = "redis"\n')

    with pytest.raises(ConfigError, match="Unknown storage mode"):
        load_config(path)


def test_invalid_toml_raises(tmp_path):
    path = _write(tmp_path, "[app\nname=")

    with pytest.raises(ConfigError, match="Failed to read"):
        load_config(path)


def test_invalid_port_raises(tmp_path):
    path = _write(tmp_path, '[app]\nstorage = "memory"\n\n[web]\nport = "abc"\n')

    with pytest.raises(ConfigError, match="Invalid config values"):
        load_config(path)
