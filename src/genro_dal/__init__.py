# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""genro-dal: Async data-access layer for Genro services."""

from .config import DalConfig, config_from_env
from .sql import SqlBuilder, SqlDb, Statement, Table

__version__ = "0.1.0"

__all__ = ["DalConfig", "SqlBuilder", "SqlDb", "Statement", "Table", "config_from_env"]
