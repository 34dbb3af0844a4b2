import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_env_and_logger(monkeypatch, tmp_path_factory):
    """
    Ensure tests don't leak env, logger state, or cached env views.
    """

    for k in list(os.environ):
        if k.startswith("LOGARCHIVE_"):
            monkeypatch.delenv(k, raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_RETENTION", raising=False)

    # Keep the tool's own run logs out of the project tree
    monkeypatch.setenv("LOGARCHIVE_LOGS_DIR", str(tmp_path_factory.mktemp("own-logs")))

    from logarchive.env import reset_env_caches
    import logarchive.logger.state

    reset_env_caches()
    logarchive.logger.state.INITIALIZED = False
    logarchive.logger.state.RUN_ID = None
    logarchive.logger.state.LOG_DIR = None
    logarchive.logger.state.LOG_FILE_PATH = None

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    yield

    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    reset_env_caches()


@pytest.fixture
def write_file():
    def _write(path, data=b"log line\n"):
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            data = data.encode("utf-8")
        path.write_bytes(data)
        return path

    return _write
