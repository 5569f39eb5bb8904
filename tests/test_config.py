"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from nb_classifier.config import ClassifierConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path):
    # setenv first so teardown also removes values load_dotenv writes
    for name in ("NB_LABEL_FIELD", "NB_CONTENT_FIELD", "NB_PRECISION"):
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


class TestClassifierConfig:
    def test_defaults(self) -> None:
        config = ClassifierConfig()
        assert config.label_field == "tag"
        assert config.content_field == "content"
        assert config.precision == 3

    def test_same_fields_rejected(self) -> None:
        with pytest.raises(ValueError, match="differ"):
            ClassifierConfig(label_field="x", content_field="x")

    def test_empty_field_rejected(self) -> None:
        with pytest.raises(ValueError):
            ClassifierConfig(label_field="")

    def test_precision_bounds(self) -> None:
        with pytest.raises(ValueError):
            ClassifierConfig(precision=0)


class TestFromEnv:
    def test_defaults_without_env(self) -> None:
        assert ClassifierConfig.from_env() == ClassifierConfig()

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("NB_LABEL_FIELD", "label")
        monkeypatch.setenv("NB_CONTENT_FIELD", "text")
        monkeypatch.setenv("NB_PRECISION", "5")
        config = ClassifierConfig.from_env()
        assert config == ClassifierConfig(label_field="label", content_field="text", precision=5)

    def test_reads_dotenv_file(self, monkeypatch, tmp_path: Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("NB_LABEL_FIELD=category\n", encoding="utf-8")
        config = ClassifierConfig.from_env(str(env_file))
        assert config.label_field == "category"

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path: Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("NB_LABEL_FIELD=category\n", encoding="utf-8")
        monkeypatch.setenv("NB_LABEL_FIELD", "kind")
        assert ClassifierConfig.from_env(str(env_file)).label_field == "kind"

    def test_bad_precision(self, monkeypatch) -> None:
        monkeypatch.setenv("NB_PRECISION", "lots")
        with pytest.raises(ValueError, match="NB_PRECISION"):
            ClassifierConfig.from_env()
