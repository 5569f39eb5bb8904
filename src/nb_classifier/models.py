"""Result data models for classification, evaluation, and reporting."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ClassificationResult:
    """Result of classifying a single document."""

    label: str
    score: float
    scores: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "score": round(self.score, 4),
            "scores": {k: round(v, 4) for k, v in sorted(self.scores.items())},
        }


@dataclass
class Prediction:
    """A single held-out record with its predicted label and winning score."""

    true_label: str
    predicted_label: str
    score: float
    content: str = ""

    @property
    def is_correct(self) -> bool:
        return self.true_label == self.predicted_label

    def to_dict(self) -> dict:
        return {
            "true_label": self.true_label,
            "predicted_label": self.predicted_label,
            "score": round(self.score, 4),
            "content": self.content,
        }


@dataclass
class EvaluationResult:
    """Predictions over a test corpus and the resulting accuracy.

    Attributes:
        predictions: One entry per test record, in input order.
        per_label: Precision, recall, and F1 for each label.
        confusion_matrix: ``{true_label: {predicted_label: count}}``.
        trained_on: Number of documents the model was trained on.
    """

    predictions: list[Prediction] = field(default_factory=list)
    per_label: dict[str, dict[str, float]] = field(default_factory=dict)
    confusion_matrix: dict[str, dict[str, int]] = field(default_factory=dict)
    trained_on: int = 0

    @property
    def total(self) -> int:
        return len(self.predictions)

    @property
    def correct(self) -> int:
        return sum(1 for p in self.predictions if p.is_correct)

    @property
    def accuracy(self) -> float:
        """Fraction of correct predictions (0.0 when nothing was evaluated)."""
        return self.correct / self.total if self.total else 0.0

    def to_dict(self) -> dict:
        return {
            "trained_on": self.trained_on,
            "correct": self.correct,
            "total": self.total,
            "accuracy": round(self.accuracy, 4),
            "per_label": {
                label: {k: round(v, 4) for k, v in metrics.items()}
                for label, metrics in self.per_label.items()
            },
            "confusion_matrix": self.confusion_matrix,
            "predictions": [p.to_dict() for p in self.predictions],
        }


@dataclass(frozen=True)
class LabelSummary:
    """A label's training document count and log-prior."""

    label: str
    document_count: int
    log_prior: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "document_count": self.document_count,
            "log_prior": round(self.log_prior, 4),
        }


@dataclass(frozen=True)
class WordParameter:
    """A (label, word) pair with non-zero count and its log-likelihood."""

    label: str
    word: str
    count: int
    log_likelihood: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "word": self.word,
            "count": self.count,
            "log_likelihood": round(self.log_likelihood, 4),
        }
