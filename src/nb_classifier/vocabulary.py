"""Corpus statistics for the document-frequency Naive Bayes model.

``train`` makes a single pass over labelled records and returns an
immutable ``VocabularyModel``. Every count is a *document* frequency:
a word repeated inside one document is counted once for that document.
"""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import EmptyCorpusError
from .preprocessing import unique_words
from .records import DEFAULT_CONTENT_FIELD, DEFAULT_LABEL_FIELD, require_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VocabularyModel:
    """Trained corpus statistics.

    Attributes:
        total_documents: Number of training records seen.
        vocabulary: Union of all document word sets.
        document_count_per_word: Documents containing each word, across all labels.
        labels: Distinct labels observed.
        document_count_per_label: Documents carrying each label.
        document_count_per_label_per_word: Per label, documents under that
            label containing each word. Only non-zero counts are stored.
    """

    total_documents: int
    vocabulary: frozenset[str]
    document_count_per_word: Mapping[str, int]
    labels: frozenset[str]
    document_count_per_label: Mapping[str, int]
    document_count_per_label_per_word: Mapping[str, Mapping[str, int]] = field(repr=False)

    def __post_init__(self) -> None:
        if self.total_documents < 0:
            raise ValueError(f"total_documents must be >= 0, got {self.total_documents}")
        if self.labels and self.total_documents == 0:
            raise EmptyCorpusError("A model with labels must be trained on at least one document.")
        for label in self.labels:
            count = self.document_count_per_label.get(label, 0)
            if count <= 0:
                raise EmptyCorpusError(f"Label {label!r} has no training documents.")
            if count > self.total_documents:
                raise ValueError(
                    f"Label {label!r} has {count} documents, more than the "
                    f"{self.total_documents} in the corpus."
                )

    @property
    def vocabulary_size(self) -> int:
        return len(self.vocabulary)

    @property
    def sorted_labels(self) -> tuple[str, ...]:
        """Labels in lexicographic order."""
        return tuple(sorted(self.labels))

    def label_count(self, label: str) -> int:
        return self.document_count_per_label.get(label, 0)

    def word_count(self, word: str) -> int:
        return self.document_count_per_word.get(word, 0)

    def label_word_count(self, label: str, word: str) -> int:
        return self.document_count_per_label_per_word.get(label, {}).get(word, 0)


def train(
    records: Iterable[Mapping[str, str]],
    label_field: str = DEFAULT_LABEL_FIELD,
    content_field: str = DEFAULT_CONTENT_FIELD,
) -> VocabularyModel:
    """Build a ``VocabularyModel`` from labelled records.

    Args:
        records: Iterable of mappings, each holding a label and content field.
        label_field: Key of the label in each record.
        content_field: Key of the document text in each record.

    Returns:
        The trained, read-only model.

    Raises:
        DataSourceError: If the source fails or a record lacks a required field.
            Nothing is returned in that case.
        EmptyCorpusError: If *records* yields no records.
    """
    total = 0
    per_label: Counter[str] = Counter()
    per_word: Counter[str] = Counter()
    per_label_word: dict[str, Counter[str]] = defaultdict(Counter)

    for record in records:
        label = require_field(record, label_field)
        words = unique_words(require_field(record, content_field))

        total += 1
        per_label[label] += 1
        per_word.update(words)
        per_label_word[label].update(words)

    if total == 0:
        raise EmptyCorpusError("Cannot train on an empty corpus: no records were read.")

    logger.info(
        "Trained on %d documents: %d labels, vocabulary size %d",
        total, len(per_label), len(per_word),
    )

    return VocabularyModel(
        total_documents=total,
        vocabulary=frozenset(per_word),
        document_count_per_word=MappingProxyType(dict(per_word)),
        labels=frozenset(per_label),
        document_count_per_label=MappingProxyType(dict(per_label)),
        document_count_per_label_per_word=MappingProxyType({
            label: MappingProxyType(dict(counts))
            for label, counts in per_label_word.items()
        }),
    )
