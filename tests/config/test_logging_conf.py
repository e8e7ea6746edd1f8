from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from genomic.config.logging_conf import configure_logging
from genomic.config.settings import Settings

pytestmark = pytest.mark.usefixtures("clean_logging")


def _settings(tmp_path: Path, **extra: object) -> Settings:
    return Settings.from_env(
        overrides={"project_root": tmp_path, "LOGS_DIR": tmp_path / "logs", **extra},
        environ={},
    )


def test_configure_logging_structured_output(tmp_path: Path) -> None:
    stream = io.StringIO()
    settings = _settings(tmp_path)

    configure_logging(
        settings=settings, structured=True, stream=stream, context={"run_id": "unit"}
    )

    logger = logging.getLogger("genomic.tests")
    logger.info("structured message", extra={"generation": 4})

    payload = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert payload["run_id"] == "unit"
    assert payload["generation"] == 4
    assert payload["logger"] == "genomic.tests"
    assert payload["message"] == "structured message"

    assert (settings.logs_dir / "genomic.log").exists()


def test_configure_logging_plaintext_respects_settings_level(tmp_path: Path) -> None:
    stream = io.StringIO()
    settings = _settings(tmp_path, log_level="warning")

    configure_logging(settings=settings, stream=stream, file_logging=False)

    logger = logging.getLogger("genomic.tests")
    logger.info("hidden")
    logger.warning("plain message")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "WARNING | genomic.tests | plain message" in output
    assert not (settings.logs_dir / "genomic.log").exists()


def test_module_levels_are_applied(tmp_path: Path) -> None:
    configure_logging(
        settings=_settings(tmp_path),
        stream=io.StringIO(),
        module_levels={"genomic.operations": "DEBUG"},
        file_logging=False,
    )
    assert logging.getLogger("genomic.operations").level == logging.DEBUG
    logging.getLogger("genomic.operations").setLevel(logging.NOTSET)
