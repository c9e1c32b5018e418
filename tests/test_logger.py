import logging

import pytest

from ra_sampling.scripts.logger import (
    DEFAULT_LOG_CFG,
    _resolve_config_path,
    setup_logging,
)


def test_missing_config_installs_null_handler(tmp_path):
    setup_logging(tmp_path / "missing.toml")

    handlers = logging.getLogger("ra_sampling").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)


def test_env_var_points_at_config(tmp_path, monkeypatch):
    cfg = tmp_path / "logging.toml"
    cfg.write_text(
        "\n".join(
            [
                "version = 1",
                "disable_existing_loggers = false",
                "",
                "[loggers.ra_sampling_logger_test]",
                'level = "DEBUG"',
            ]
        )
    )
    monkeypatch.setenv("RA_SAMPLING_LOG_CFG", str(cfg))

    setup_logging()

    assert logging.getLogger("ra_sampling_logger_test").level == logging.DEBUG


def test_directory_is_rejected(tmp_path):
    with pytest.raises(FileNotFoundError):
        setup_logging(tmp_path)


def test_explicit_path_wins_over_env_var(tmp_path, monkeypatch):
    cfg = tmp_path / "logging.toml"
    cfg.write_text("version = 1\n")
    monkeypatch.setenv("RA_SAMPLING_LOG_CFG", str(tmp_path / "missing.toml"))

    assert _resolve_config_path(cfg) == cfg
    assert _resolve_config_path() == tmp_path / "missing.toml"
    monkeypatch.delenv("RA_SAMPLING_LOG_CFG")
    assert _resolve_config_path() == DEFAULT_LOG_CFG
