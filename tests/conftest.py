"""Pytest configuration for installgen."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from installgen.core import ManifestDocument  # noqa: E402
from tests._helpers import read_fixture  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep real .env files and ~/.installgen out of every test."""
    monkeypatch.setenv("HOME", str(tmp_path_factory.mktemp("home")))
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    for name in (
        "INSTALLGEN_BOSH_URL",
        "INSTALLGEN_OUTPUT_DIR",
        "INSTALLGEN_BOSH_USERNAME",
        "INSTALLGEN_BOSH_PASSWORD",
        "INSTALLGEN_LOG_DIR",
        "INSTALLGEN_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def job_scope_text() -> str:
    return read_fixture("cf-diego-job-scope.yml")


@pytest.fixture
def global_scope_text() -> str:
    return read_fixture("cf-diego-global-scope.yml")


@pytest.fixture
def job_scope_manifest(job_scope_text: str) -> ManifestDocument:
    return ManifestDocument.from_yaml(job_scope_text)


@pytest.fixture
def global_scope_manifest(global_scope_text: str) -> ManifestDocument:
    return ManifestDocument.from_yaml(global_scope_text)
