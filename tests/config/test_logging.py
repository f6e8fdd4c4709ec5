# topmark:header:start
#
#   project      : svfmt
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Environment-driven log level resolution."""

from __future__ import annotations

import logging as std_logging

import pytest

from svfmt.config.logging import TRACE_LEVEL, SvfmtLogger, get_logger, resolve_env_log_level
from tests.conftest import mark_config, parametrize


@mark_config
@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("10", 10),
        ("loud", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv("SVFMT_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


@mark_config
def test_unset_env_log_level() -> None:
    assert resolve_env_log_level() is None


@mark_config
def test_loggers_support_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("svfmt.tests.trace")
    assert isinstance(logger, SvfmtLogger)
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("walking %s", "node")
    assert ("svfmt.tests.trace", TRACE_LEVEL, "walking node") in caplog.record_tuples
