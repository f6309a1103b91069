"""Runtime settings for the Registrar service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


class ConfigError(Exception):
    """Raised when configuration is invalid."""


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, str(default))
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class Settings:
    """Service settings.

    Attributes:
        db_path: SQLite database file, or ":memory:".
        log_dir: Directory for rotating log files.
        log_level: Name of the log level.
        log_max_bytes: Size a log file may reach before it is rotated.
        log_backup_count: Number of rotated log files kept.
        host: Interface the API binds to.
        port: Port the API listens on.
    """

    db_path: str = "registrar.db"
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_max_bytes: int = 10 * 1024 * 1024
    log_backup_count: int = 5
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from REGISTRAR_* environment variables.

        Args:
            environ: Environment to read. Defaults to ``os.environ``.

        Raises:
            ConfigError: If a value cannot be parsed.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        port = _int_setting(env, "REGISTRAR_PORT", defaults.port)
        if not 0 < port < 65536:
            raise ConfigError(f"REGISTRAR_PORT out of range: {port}")

        return cls(
            db_path=env.get("REGISTRAR_DB_PATH", defaults.db_path),
            log_dir=env.get("REGISTRAR_LOG_DIR", defaults.log_dir),
            log_level=env.get("REGISTRAR_LOG_LEVEL", defaults.log_level).upper(),
            log_max_bytes=_int_setting(env, "REGISTRAR_LOG_MAX_BYTES", defaults.log_max_bytes),
            log_backup_count=_int_setting(
                env, "REGISTRAR_LOG_BACKUP_COUNT", defaults.log_backup_count
            ),
            host=env.get("REGISTRAR_HOST", defaults.host),
            port=port,
        )
