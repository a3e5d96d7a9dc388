"""Tests for heartbeat.config — Settings defaults and env override."""

from __future__ import annotations

import pytest
from pydantic import ValidationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("INTERVAL", "HEARTBEAT_INTERVAL", "HEARTBEAT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


class TestSettings:
    def test_default_values(self):
        from heartbeat.config import Settings
        s = Settings(_env_file=None)
        assert s.interval == 30.0
        assert s.log_level == "WARNING"

    def test_sources_are_not_settings(self):
        from heartbeat.config import Settings
        fields = set(Settings.model_fields)
        assert fields == {"interval", "log_level"}

    def test_source_constants(self):
        from heartbeat.config import (
            HOSTNAME_PATH,
            LOADAVG_PATH,
            MEMINFO_PATH,
            UPTIME_PATH,
        )
        assert UPTIME_PATH == "/proc/uptime"
        assert MEMINFO_PATH == "/proc/meminfo"
        assert LOADAVG_PATH == "/proc/loadavg"
        assert HOSTNAME_PATH == "/etc/hostname"

    def test_source_paths_ignore_env(self, monkeypatch):
        from heartbeat.config import Settings
        monkeypatch.setenv("HEARTBEAT_HOSTNAME_PATH", "/tmp/hostname")
        s = Settings(_env_file=None)
        assert not hasattr(s, "hostname_path")

    def test_env_prefix(self):
        from heartbeat.config import Settings
        assert Settings.model_config["env_prefix"] == "HEARTBEAT_"

    def test_env_override(self, monkeypatch):
        from heartbeat.config import Settings
        monkeypatch.setenv("HEARTBEAT_INTERVAL", "5")
        s = Settings(_env_file=None)
        assert s.interval == 5.0

    def test_rejects_non_positive_interval(self, monkeypatch):
        from heartbeat.config import Settings
        monkeypatch.setenv("HEARTBEAT_INTERVAL", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_reads_dotenv_file(self, tmp_path):
        from heartbeat.config import Settings
        conf = tmp_path / "heartbeat.conf"
        conf.write_text("HEARTBEAT_INTERVAL=12\nUNRELATED=1\n")
        s = Settings(_env_file=conf)
        assert s.interval == 12.0

    def test_reads_bare_interval_from_conf_file(self, tmp_path):
        """Shell-style heartbeat.conf files set INTERVAL without a prefix."""
        from heartbeat.config import Settings
        conf = tmp_path / "heartbeat.conf"
        conf.write_text("INTERVAL=60\n")
        s = Settings(_env_file=conf)
        assert s.interval == 60.0

    def test_init_by_field_name(self):
        from heartbeat.config import Settings
        assert Settings(_env_file=None, interval=0.5).interval == 0.5

    def test_module_settings_instance(self):
        from heartbeat.config import Settings, settings
        assert isinstance(settings, Settings)


class TestLogLevel:
    def test_lowercase_is_normalized(self, monkeypatch):
        from heartbeat.config import Settings
        monkeypatch.setenv("HEARTBEAT_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_rejects_unknown_level(self, monkeypatch):
        from heartbeat.config import Settings
        monkeypatch.setenv("HEARTBEAT_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
