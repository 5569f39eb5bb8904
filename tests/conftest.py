"""Shared test fixtures for nb-classifier tests."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from nb_classifier.vocabulary import VocabularyModel, train


@pytest.fixture
def spam_ham_records() -> list[dict[str, str]]:
    """Two-document corpus with one shared word."""
    return [
        {"label": "spam", "content": "buy now buy"},
        {"label": "ham", "content": "meeting now"},
    ]


@pytest.fixture
def spam_ham_model(spam_ham_records) -> VocabularyModel:
    return train(spam_ham_records)


@pytest.fixture
def separable_records() -> list[dict[str, str]]:
    """Two labels with disjoint vocabularies."""
    return [
        {"label": "pos", "content": "alpha beta"},
        {"label": "neg", "content": "gamma delta"},
    ]


@pytest.fixture
def news_records() -> list[dict[str, str]]:
    """A small multi-label corpus with overlapping vocabulary."""
    return [
        {"label": "sports", "content": "the team won the match"},
        {"label": "sports", "content": "coach praised the team"},
        {"label": "sports", "content": "match ends in a draw"},
        {"label": "politics", "content": "the senate passed the bill"},
        {"label": "politics", "content": "vote on the bill delayed"},
        {"label": "tech", "content": "new phone released today"},
    ]


def _write_csv(path: Path, rows: list[dict[str, str]], fieldnames: list[str]) -> Path:
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)
    return path


@pytest.fixture
def make_csv(tmp_path: Path):
    """Factory writing rows to a CSV file under tmp_path."""
    def _make(name: str, rows: list[dict[str, str]], fieldnames: list[str]) -> Path:
        return _write_csv(tmp_path / name, rows, fieldnames)
    return _make


@pytest.fixture
def train_csv(tmp_path: Path) -> Path:
    """Training CSV in the ``tag``/``content`` column layout."""
    rows = [
        {"n": "1", "tag": "spam", "content": "buy now buy"},
        {"n": "2", "tag": "ham", "content": "meeting now"},
        {"n": "3", "tag": "spam", "content": "cheap pills buy"},
        {"n": "4", "tag": "ham", "content": "lunch meeting tomorrow"},
    ]
    return _write_csv(tmp_path / "train.csv", rows, ["n", "tag", "content"])


@pytest.fixture
def test_csv(tmp_path: Path) -> Path:
    rows = [
        {"tag": "spam", "content": "buy cheap"},
        {"tag": "ham", "content": "meeting at lunch"},
        {"tag": "spam", "content": "lunch tomorrow"},
    ]
    return _write_csv(tmp_path / "test.csv", rows, ["tag", "content"])
