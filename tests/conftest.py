"""Shared fixtures: isolated settings, a respx router for the ATC, a client."""

from __future__ import annotations

import logging

import pytest
import respx

from adapters.pipelines_client import PipelineClient
from core.config import AppSettings

ATC_URL = "http://atc.example.com"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the developer's .env files and env vars."""
    monkeypatch.chdir(tmp_path)
    user_env = tmp_path / "user" / ".env"
    monkeypatch.setattr("core.config.get_user_env_file", lambda: user_env)
    # model_config["env_file"] is resolved at import time, so redirect it as well.
    monkeypatch.setitem(AppSettings.model_config, "env_file", (".env", str(user_env)))
    for key in ("ATC_PIPELINES_ATC_URL", "ATC_PIPELINES_LOG_LEVEL", "ATC_PIPELINES_INSECURE_SKIP_VERIFY"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(atc_url=ATC_URL, _env_file=None)


@pytest.fixture
def atc():
    with respx.mock(base_url=ATC_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def client(settings, atc):
    with PipelineClient(settings=settings) as pipeline_client:
        yield pipeline_client


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI installs a RichHandler on the root logger; undo it per test."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    httpx_level = logging.getLogger("httpx").level
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
    logging.getLogger("httpx").setLevel(httpx_level)
