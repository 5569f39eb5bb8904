"""Exception types raised by the classifier."""

from __future__ import annotations


class ClassifierError(Exception):
    """Base class for all classifier errors."""


class DataSourceError(ClassifierError):
    """A record source could not be opened, read, or is malformed."""


class EmptyCorpusError(ClassifierError, ValueError):
    """Training was attempted on a corpus with no records."""


class NoLabelsError(ClassifierError, RuntimeError):
    """Prediction was attempted against a model with no labels."""


class UnknownLabelError(ClassifierError, ValueError):
    """Scoring was requested for a label never observed in training."""

    def __init__(self, label: str, known: tuple[str, ...] = ()) -> None:
        self.label = label
        self.known = known
        super().__init__(f"Unknown label: {label!r}. Known: {list(known)}")
