"""Log-probability scoring and label prediction.

Scores a document (a set of distinct words) against a label as::

    ln(P(label)) + sum over words w of ln(P(w | label))

where every probability is a document-frequency ratio. Word
probabilities fall back through three tiers:

1. the word occurred under the label: ``count(label, w) / count(label)``
2. the word occurred only under other labels: ``count(w) / total``
3. the word never occurred in training: ``1 / total``

Scores are natural logs, always <= 0; higher means more likely.
Prediction picks the best-scoring label, walking labels in sorted order
and only replacing the incumbent on a strictly greater score, so ties
go to the lexicographically smallest label.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Optional

from .errors import NoLabelsError, UnknownLabelError
from .models import ClassificationResult, EvaluationResult, Prediction
from .preprocessing import sorted_words, unique_words
from .records import DEFAULT_CONTENT_FIELD, DEFAULT_LABEL_FIELD, require_field
from .vocabulary import VocabularyModel, train

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def _check_label(model: VocabularyModel, label: str) -> None:
    if label not in model.labels:
        raise UnknownLabelError(label, model.sorted_labels)


def log_prior(model: VocabularyModel, label: str) -> float:
    """Log of the label's share of training documents."""
    _check_label(model, label)
    return math.log(model.document_count_per_label[label] / model.total_documents)


def log_likelihood(model: VocabularyModel, label: str, word: str) -> float:
    """Log-probability contribution of *word* being present under *label*."""
    _check_label(model, label)
    count = model.label_word_count(label, word)
    if count > 0:
        return math.log(count / model.document_count_per_label[label])
    if word in model.vocabulary:
        return math.log(model.document_count_per_word[word] / model.total_documents)
    return math.log(1 / model.total_documents)


def score(model: VocabularyModel, words: Iterable[str], label: str) -> float:
    """Log-probability score of a document against one label.

    Args:
        model: Trained model.
        words: The document's words. Repeats are collapsed before scoring.
        label: A label observed in training.

    Raises:
        UnknownLabelError: If *label* was never observed in training.
        TypeError: If *words* is a plain string.
    """
    total = log_prior(model, label)
    for word in sorted_words(words):
        total += log_likelihood(model, label, word)
    return total


def label_scores(model: VocabularyModel, words: Iterable[str]) -> dict[str, float]:
    """Score a document against every label, keyed in sorted label order."""
    document = sorted_words(words)
    return {label: score(model, document, label) for label in model.sorted_labels}


def _argmax(scores: Mapping[str, float]) -> str:
    best_label: Optional[str] = None
    best_score = -math.inf
    for label in sorted(scores):
        if best_label is None or scores[label] > best_score:
            best_label, best_score = label, scores[label]
    if best_label is None:
        raise NoLabelsError("Cannot predict: the model has no labels.")
    return best_label


def predict(model: VocabularyModel, words: Iterable[str]) -> str:
    """Return the highest-scoring label for a document.

    Raises:
        NoLabelsError: If the model has no labels.
        TypeError: If *words* is a plain string.
    """
    if not model.labels:
        raise NoLabelsError("Cannot predict: the model has no labels.")
    return _argmax(label_scores(model, words))


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def compute_metrics(
    y_true: list[str],
    y_pred: list[str],
) -> tuple[dict[str, dict[str, float]], dict[str, dict[str, int]]]:
    """Per-label precision/recall/F1 and the confusion matrix.

    Returns:
        ``(per_label, confusion_matrix)`` where the matrix is keyed
        ``[true_label][predicted_label]``.
    """
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")

    labels = sorted(set(y_true) | set(y_pred))
    cm: dict[str, dict[str, int]] = {t: {p: 0 for p in labels} for t in labels}
    for true, pred in zip(y_true, y_pred):
        cm[true][pred] += 1

    per_label: dict[str, dict[str, float]] = {}
    for label in labels:
        tp = cm[label][label]
        predicted = sum(cm[other][label] for other in labels)
        actual = sum(cm[label].values())

        precision = tp / predicted if predicted else 0.0
        recall = tp / actual if actual else 0.0
        f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
        per_label[label] = {"precision": precision, "recall": recall, "f1": f1}

    return per_label, cm


def evaluate(
    model: VocabularyModel,
    records: Iterable[Mapping[str, str]],
    label_field: str = DEFAULT_LABEL_FIELD,
    content_field: str = DEFAULT_CONTENT_FIELD,
) -> EvaluationResult:
    """Predict every held-out record and tally accuracy.

    Labels in the test set that never occurred in training are allowed;
    they can never be predicted and so always count as misses.

    Raises:
        DataSourceError: If the source fails or a record lacks a field.
    """
    predictions: list[Prediction] = []
    for record in records:
        true_label = require_field(record, label_field)
        content = require_field(record, content_field)

        scores = label_scores(model, unique_words(content))
        predicted = _argmax(scores)
        predictions.append(Prediction(
            true_label=true_label,
            predicted_label=predicted,
            score=scores[predicted],
            content=content,
        ))

    per_label, cm = compute_metrics(
        [p.true_label for p in predictions],
        [p.predicted_label for p in predictions],
    )
    result = EvaluationResult(
        predictions=predictions,
        per_label=per_label,
        confusion_matrix=cm,
        trained_on=model.total_documents,
    )
    logger.info("Evaluated %d records: %d correct", result.total, result.correct)
    return result


# ---------------------------------------------------------------------------
# Classifier session (high-level API)
# ---------------------------------------------------------------------------

class NaiveBayesClassifier:
    """Train-then-query wrapper around a ``VocabularyModel``.

    Example::

        classifier = NaiveBayesClassifier()
        classifier.train(CsvRecordSource("train.csv"))

        result = classifier.classify("buy now")
        print(result.label, result.score)

        report = classifier.evaluate(CsvRecordSource("test.csv"))
        print(f"{report.correct} / {report.total}")

    Args:
        label_field: Record key holding the label.
        content_field: Record key holding the document text.
    """

    def __init__(
        self,
        label_field: str = DEFAULT_LABEL_FIELD,
        content_field: str = DEFAULT_CONTENT_FIELD,
    ) -> None:
        self.label_field = label_field
        self.content_field = content_field
        self._model: Optional[VocabularyModel] = None

    @property
    def is_trained(self) -> bool:
        return self._model is not None

    @property
    def model(self) -> VocabularyModel:
        """The trained model.

        Raises:
            RuntimeError: If the classifier has not been trained.
        """
        if self._model is None:
            raise RuntimeError("Classifier not trained. Call train() first.")
        return self._model

    @property
    def labels(self) -> tuple[str, ...]:
        return self._model.sorted_labels if self._model else ()

    def train(self, records: Iterable[Mapping[str, str]]) -> VocabularyModel:
        """Train on *records*, replacing any previous model.

        On failure the previous model (if any) is discarded and the
        classifier is left untrained.
        """
        self._model = None
        self._model = train(records, self.label_field, self.content_field)
        return self._model

    def classify(self, text: str) -> ClassificationResult:
        """Classify a single raw document."""
        scores = label_scores(self.model, unique_words(text))
        label = _argmax(scores)
        return ClassificationResult(label=label, score=scores[label], scores=scores)

    def predict(self, words: Iterable[str]) -> str:
        return predict(self.model, words)

    def score(self, words: Iterable[str], label: str) -> float:
        return score(self.model, words, label)

    def evaluate(self, records: Iterable[Mapping[str, str]]) -> EvaluationResult:
        return evaluate(self.model, records, self.label_field, self.content_field)

