"""nb-classifier -- document-frequency Naive Bayes text classification."""

__version__ = "0.1.0"

from .classifier import (
    NaiveBayesClassifier,
    compute_metrics,
    evaluate,
    label_scores,
    log_likelihood,
    log_prior,
    predict,
    score,
)
from .config import ClassifierConfig
from .errors import (
    ClassifierError,
    DataSourceError,
    EmptyCorpusError,
    NoLabelsError,
    UnknownLabelError,
)
from .models import (
    ClassificationResult,
    EvaluationResult,
    LabelSummary,
    Prediction,
    WordParameter,
)
from .preprocessing import sorted_words, unique_words
from .records import CsvRecordSource, read_records
from .report import (
    label_summaries,
    render_evaluation_report,
    render_training_report,
    word_parameters,
)
from .vocabulary import VocabularyModel, train

__all__ = [
    # Training
    "VocabularyModel",
    "train",
    "unique_words",
    "sorted_words",
    # Scoring and prediction
    "score",
    "predict",
    "label_scores",
    "log_prior",
    "log_likelihood",
    "NaiveBayesClassifier",
    "ClassificationResult",
    # Evaluation
    "evaluate",
    "compute_metrics",
    "EvaluationResult",
    "Prediction",
    # Reporting
    "label_summaries",
    "word_parameters",
    "render_training_report",
    "render_evaluation_report",
    "LabelSummary",
    "WordParameter",
    # Records and configuration
    "CsvRecordSource",
    "read_records",
    "ClassifierConfig",
    # Errors
    "ClassifierError",
    "DataSourceError",
    "EmptyCorpusError",
    "NoLabelsError",
    "UnknownLabelError",
]
