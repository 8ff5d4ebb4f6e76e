# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Configuration for the data-access layer.

Configuration via environment variables:
    GENRO_DAL_DB: Database path (SQLite file or PostgreSQL URL)
    GENRO_DAL_POOL_SIZE: Maximum pooled connections (PostgreSQL only)
    GENRO_DAL_CONNECT_TIMEOUT: Seconds to wait for the pool to open
    GENRO_DAL_LOG_LEVEL: Logging level name used by the CLI

Usage:
    # From environment (Docker/production):
    db = SqlDb.from_config(config_from_env())

    # Explicit configuration:
    config = DalConfig(db_url="postgresql://app@localhost/app", pool_size=4)
    db = SqlDb.from_config(config)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class DalConfig:
    """Connection settings for SqlDb.

    Attributes:
        db_url: SQLite path, ``sqlite:<path>``, ``:memory:`` or PostgreSQL URL.
        pool_size: Maximum connections kept by the PostgreSQL pool.
        connect_timeout: Seconds to wait for the first pooled connection.
        log_level: Logging level name (DEBUG shows SQL text).
    """

    db_url: str = ":memory:"
    """Database connection string."""

    pool_size: int = 10
    """Maximum pooled connections (PostgreSQL)."""

    connect_timeout: float = 10.0
    """Seconds to wait for the pool to open (PostgreSQL)."""

    log_level: str = "WARNING"
    """Logging level name."""


def config_from_env() -> DalConfig:
    """Build DalConfig from GENRO_DAL_* environment variables.

    Environment variables:
        GENRO_DAL_DB: Database connection string (default: ":memory:")
        GENRO_DAL_POOL_SIZE: Pool size (default: 10)
        GENRO_DAL_CONNECT_TIMEOUT: Connect timeout in seconds (default: 10)
        GENRO_DAL_LOG_LEVEL: Logging level (default: WARNING)

    Returns:
        DalConfig instance populated from environment.

    Raises:
        ValueError: If a numeric variable does not parse.
    """
    return DalConfig(
        db_url=os.environ.get("GENRO_DAL_DB", ":memory:"),
        pool_size=int(os.environ.get("GENRO_DAL_POOL_SIZE", "10")),
        connect_timeout=float(os.environ.get("GENRO_DAL_CONNECT_TIMEOUT", "10")),
        log_level=os.environ.get("GENRO_DAL_LOG_LEVEL", "WARNING").upper(),
    )


__all__ = ["DalConfig", "config_from_env"]
