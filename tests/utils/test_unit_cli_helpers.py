# SPDX-License-Identifier: Apache-2.0
import logging
import os
from types import SimpleNamespace

from globeframe.utils.cli_helpers import (
    VERBOSITY_ENV,
    apply_verbosity_flags,
    configure_logging_from_env,
)


def test_verbose_flag_sets_debug(monkeypatch):
    monkeypatch.setenv(VERBOSITY_ENV, "info")
    apply_verbosity_flags(SimpleNamespace(verbose=True, quiet=False))
    assert os.environ[VERBOSITY_ENV] == "debug"
    assert configure_logging_from_env() == logging.DEBUG


def test_quiet_flag_sets_error_level(monkeypatch):
    monkeypatch.setenv(VERBOSITY_ENV, "info")
    apply_verbosity_flags(SimpleNamespace(verbose=False, quiet=True))
    assert configure_logging_from_env() == logging.ERROR


def test_unknown_verbosity_falls_back_to_default(monkeypatch):
    monkeypatch.setenv(VERBOSITY_ENV, "chatty")
    assert configure_logging_from_env() == logging.INFO
    assert logging.getLogger().level == logging.INFO
