"""Migrations: the Alembic environment renders the `cars` schema.

Invariants:
    - env.py takes its URL from Settings, not from alembic.ini
    - 001_cars creates the cars table with a non-autoincrement id
"""

import io
from pathlib import Path

from alembic import command
from alembic.config import Config

from car_service.config import get_settings

ALEMBIC_DIR = Path(__file__).resolve().parent.parent / "alembic"


def _offline_config(buffer: io.StringIO) -> Config:
    config = Config(output_buffer=buffer)
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    return config


def test_offline_upgrade_renders_cars_table():
    buffer = io.StringIO()
    config = _offline_config(buffer)
    command.upgrade(config, "head", sql=True)
    sql = buffer.getvalue()
    assert "CREATE TABLE cars" in sql
    assert "price NUMERIC(10, 2) NOT NULL" in sql


def test_env_uses_settings_database_url():
    config = _offline_config(io.StringIO())
    command.upgrade(config, "head", sql=True)
    assert config.get_main_option("sqlalchemy.url") == get_settings().database_url
