"""Data storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_DATA_DIR: Final[str] = "data"
DEFAULT_DB_FILENAME: Final[str] = "stats.db"
KABKOTA_FILENAME: Final[str] = "kabkota.json"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Layout of the data directory.

    ``sholat/kabkota.json`` lists the locations, ``sholat/jadwal/{year}/`` holds
    one schedule file per location and month, ``log/`` receives daily access logs.
    """

    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    @property
    def sholat_dir(self) -> Path:
        return self.resolve_data_dir() / "sholat"

    @property
    def kabkota_path(self) -> Path:
        return self.sholat_dir / KABKOTA_FILENAME

    @property
    def jadwal_dir(self) -> Path:
        return self.sholat_dir / "jadwal"

    @property
    def log_dir(self) -> Path:
        return self.resolve_data_dir() / "log"

    def database_path(self, *, ensure: bool = True) -> Path:
        base = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return base / self.database_filename

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv("APIMUSLIM_DATA_DIR")
    data_dir = Path(env_dir) if env_dir else Path.cwd() / DEFAULT_DATA_DIR
    return StorageConfig(data_dir=data_dir)


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    storage_config = storage or get_storage_config()
    return DatabaseConfig(uri=storage_config.database_uri())
