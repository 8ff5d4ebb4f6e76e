# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for config module - DalConfig and environment loading."""

from __future__ import annotations

import pytest

from genro_dal.config import DalConfig, config_from_env

ENV_VARS = (
    "GENRO_DAL_DB",
    "GENRO_DAL_POOL_SIZE",
    "GENRO_DAL_CONNECT_TIMEOUT",
    "GENRO_DAL_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestDalConfig:
    """Tests for DalConfig defaults and environment overrides."""

    def test_defaults(self):
        config = DalConfig()
        assert config.db_url == ":memory:"
        assert config.pool_size == 10
        assert config.connect_timeout == 10.0
        assert config.log_level == "WARNING"

    def test_from_env_defaults(self):
        assert config_from_env() == DalConfig()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("GENRO_DAL_DB", "postgresql://app@db/app")
        monkeypatch.setenv("GENRO_DAL_POOL_SIZE", "4")
        monkeypatch.setenv("GENRO_DAL_CONNECT_TIMEOUT", "2.5")
        monkeypatch.setenv("GENRO_DAL_LOG_LEVEL", "debug")
        config = config_from_env()
        assert config == DalConfig(
            db_url="postgresql://app@db/app",
            pool_size=4,
            connect_timeout=2.5,
            log_level="DEBUG",
        )

    def test_bad_number_raises(self, monkeypatch):
        monkeypatch.setenv("GENRO_DAL_POOL_SIZE", "many")
        with pytest.raises(ValueError):
            config_from_env()
