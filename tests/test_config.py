from __future__ import annotations

import logging
import os
import subprocess
import sys

import pytest

from lightnet.__main__ import _parse_args, settings_from_args
from lightnet.config import Settings, get_logging_config, setup_logging

_ENV_KEYS = ("LIGHTNET_HOST", "LIGHTNET_PORT", "LIGHTNET_LOG_LEVEL", "LIGHTNET_CALLER_HEADER", "LIGHTNET_URL")


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)

    s = Settings()
    assert (s.host, s.port, s.log_level, s.caller_header, s.url) == ("127.0.0.1", 8000, "info", "X-Caller", "")


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIGHTNET_HOST", "0.0.0.0")
    monkeypatch.setenv("LIGHTNET_PORT", "9001")
    monkeypatch.setenv("LIGHTNET_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LIGHTNET_CALLER_HEADER", "X-Principal")
    monkeypatch.setenv("LIGHTNET_URL", " http://127.0.0.1:9001 ")

    s = Settings()
    assert s.host == "0.0.0.0"
    assert s.port == 9001
    assert s.log_level == "debug"
    assert s.caller_header == "X-Principal"
    assert s.url == "http://127.0.0.1:9001"


def test_settings_rejects_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("LIGHTNET_PORT", "eighty")
    with pytest.raises(ValueError):
        Settings()

    monkeypatch.setenv("LIGHTNET_PORT", "8000")
    monkeypatch.setenv("LIGHTNET_CALLER_HEADER", " ")
    with pytest.raises(ValueError):
        Settings()


def test_keyword_arguments_override_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("LIGHTNET_PORT", "eighty")

    assert Settings(port=9000).port == 9000


def test_cli_flags_override_bad_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("LIGHTNET_PORT", "eighty")
    monkeypatch.setenv("LIGHTNET_HOST", "0.0.0.0")

    s = settings_from_args(_parse_args(["--port", "9000", "--log-level", "debug"]))
    assert s.port == 9000
    assert s.host == "0.0.0.0"
    assert s.log_level == "debug"

    with pytest.raises(ValueError):
        settings_from_args(_parse_args([]))


def test_import_and_help_survive_bad_env() -> None:
    env = dict(os.environ)
    env["LIGHTNET_PORT"] = "eighty"
    env["LIGHTNET_CALLER_HEADER"] = " "

    imported = subprocess.run(
        [
            sys.executable,
            "-c",
            "import lightnet, lightnet.runtime.app; from lightnet.core.registry import NetworkRegistry; print('ok')",
        ],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert imported.returncode == 0, imported.stderr
    assert imported.stdout.strip() == "ok"

    helped = subprocess.run(
        [sys.executable, "-m", "lightnet", "--help"],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )
    assert helped.returncode == 0, helped.stderr
    assert "--port" in helped.stdout


def test_setup_logging_configures_package_logger() -> None:
    cfg = get_logging_config("debug")
    assert cfg["loggers"]["lightnet"]["level"] == "DEBUG"

    logger = setup_logging("warning")
    assert logger.name == "lightnet"
    assert logger.level == logging.WARNING
