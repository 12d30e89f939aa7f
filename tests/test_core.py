# tests/test_core.py
"""
Settings and structured logging setup.
"""
import json
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from kefir.core.config import Settings
from kefir.languages.turkish import TurkishMorphologyEngine
from kefir.core.logging import (
    LoggerRegistry,
    configure_logging,
    engine_logger,
    get_logger,
    language_logger,
)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "LOG_JSON", "DEFAULT_LANGUAGE", "SENTENCE_DELIMITER"):
            monkeypatch.delenv(f"KEFIR_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_JSON is False
        assert settings.DEFAULT_LANGUAGE == "tr"
        assert settings.SENTENCE_DELIMITER == " "

    def test_environment_overrides(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("KEFIR_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("KEFIR_LOG_JSON", "true")
        settings = fresh_settings()
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_JSON is True

    def test_settings_are_cached(self, fresh_settings):
        assert fresh_settings() is fresh_settings()


class TestLogging:
    def test_registry_reuses_loggers(self):
        assert LoggerRegistry.get("engine") is engine_logger()
        assert language_logger() is LoggerRegistry.get("languages")
        assert engine_logger() is not language_logger()

    def test_json_output(self, capsys, restore_logging):
        configure_logging(level="DEBUG", json_logs=True)
        get_logger("kefir.test").info("form_generated", form="kitaba")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "form_generated"
        assert payload["form"] == "kitaba"
        assert payload["level"] == "info"
        assert payload["service"] == "kefir"
        assert payload["logger"] == "kefir.test"

    @pytest.mark.parametrize("level, expected", [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("nonsense", logging.INFO),
    ])
    def test_level_is_applied_to_root(self, restore_logging, level, expected):
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_settings_drive_configure_logging(self, monkeypatch, fresh_settings, capsys, restore_logging):
        monkeypatch.setenv("KEFIR_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("KEFIR_LOG_JSON", "true")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

        log = get_logger("kefir.test")
        log.info("hidden")
        log.warning("generation_rejected", lemma="krt")

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["event"] == "generation_rejected"


class TestLibrarySilence:
    def test_unconfigured_engine_writes_nothing(self, capsys):
        engine = TurkishMorphologyEngine()
        engine.generate("kitap", case="dative")
        engine.generate_result("ev", copula="optative")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_import_writes_nothing(self):
        root = Path(__file__).resolve().parents[1]
        env = {**os.environ, "KEFIR_LOG_LEVEL": "DEBUG", "KEFIR_LOG_JSON": "true"}
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(root), env.get("PYTHONPATH")]))
        code = (
            "import kefir\n"
            "from kefir.languages import get_module\n"
            "get_module('tr').get_morphology_engine().generate('ev', case='locative')\n"
        )
        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True, text=True, env=env, check=True,
        )
        assert result.stdout == ""
        assert "language_registered" not in result.stderr
        assert "form_generated" not in result.stderr


def test_suite_collects_tests_and_doctests(pytestconfig):
    assert pytestconfig.getini("testpaths") == ["tests", "kefir"]
    assert all(opt.startswith("-") for opt in pytestconfig.getini("addopts"))
