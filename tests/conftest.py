from __future__ import annotations

import inspect
import logging

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    # click >= 8.2 always separates stderr and dropped the mix_stderr flag
    if "mix_stderr" in inspect.signature(CliRunner).parameters:
        return CliRunner(mix_stderr=False)
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path) -> None:  # noqa: ANN001
    for key in (
        "PLATFORMFIT_CATALOG_PATH",
        "PLATFORMFIT_DEFAULT_STRATEGY",
        "PLATFORMFIT_DEFAULT_QUALITY",
        "PLATFORMFIT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_package_log_level() -> None:
    package_logger = logging.getLogger("platformfit")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
