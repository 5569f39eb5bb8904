"""Read-only reporting over a trained model and evaluation results.

``label_summaries`` and ``word_parameters`` expose the model's
parameters in a stable display order. The ``render_*`` helpers turn them
into the plain-text report format, with numbers printed to a fixed
number of significant digits.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .classifier import log_likelihood, log_prior
from .models import EvaluationResult, LabelSummary, WordParameter
from .records import DEFAULT_CONTENT_FIELD, DEFAULT_LABEL_FIELD
from .vocabulary import VocabularyModel


def label_summaries(model: VocabularyModel) -> Iterator[LabelSummary]:
    """Yield each label's document count and log-prior, in sorted label order."""
    for label in model.sorted_labels:
        yield LabelSummary(
            label=label,
            document_count=model.document_count_per_label[label],
            log_prior=log_prior(model, label),
        )


def word_parameters(model: VocabularyModel) -> Iterator[WordParameter]:
    """Yield every (label, word) pair seen in training, sorted by label then word."""
    for label in model.sorted_labels:
        counts = model.document_count_per_label_per_word.get(label, {})
        for word in sorted(counts):
            yield WordParameter(
                label=label,
                word=word,
                count=counts[word],
                log_likelihood=log_likelihood(model, label, word),
            )


def format_number(value: float, precision: int = 3) -> str:
    """Format *value* with *precision* significant digits."""
    return f"{value:.{precision}g}"


def render_training_report(
    model: VocabularyModel,
    records: Iterable[Mapping[str, str]] = (),
    label_field: str = DEFAULT_LABEL_FIELD,
    content_field: str = DEFAULT_CONTENT_FIELD,
    precision: int = 3,
) -> str:
    """Plain-text dump of the training data, the classes, and the parameters.

    *records* is echoed under a ``training data:`` heading when given.
    """
    lines: list[str] = []
    if records:
        lines.append("training data:")
        for record in records:
            lines.append(f"  label = {record[label_field]}, content = {record[content_field]}")

    lines.append(f"trained on {model.total_documents} examples")
    lines.append(f"vocabulary size = {model.vocabulary_size}")
    lines.append("")

    lines.append("classes:")
    for summary in label_summaries(model):
        lines.append(
            f"  {summary.label}, {summary.document_count} examples, "
            f"log-prior = {format_number(summary.log_prior, precision)}"
        )

    lines.append("classifier parameters:")
    for param in word_parameters(model):
        lines.append(
            f"  {param.label}:{param.word}, count = {param.count}, "
            f"log-likelihood = {format_number(param.log_likelihood, precision)}"
        )
    lines.append("")
    return "\n".join(lines)


def render_evaluation_report(result: EvaluationResult, precision: int = 3) -> str:
    """Plain-text per-record predictions followed by the accuracy tally."""
    lines = [f"trained on {result.trained_on} examples", "", "test data:"]
    for p in result.predictions:
        lines.append(
            f"  correct = {p.true_label}, predicted = {p.predicted_label}, "
            f"log-probability score = {format_number(p.score, precision)}"
        )
        lines.append(f"  content = {p.content}")
        lines.append("")
    lines.append(f"performance: {result.correct} / {result.total} posts predicted correctly")
    return "\n".join(lines)
