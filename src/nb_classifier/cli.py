"""Command-line interface for the Naive Bayes text classifier.

Provides ``inspect``, ``evaluate``, and ``classify`` commands with rich
terminal output using the ``click`` and ``rich`` libraries.

Usage::

    nb-classifier inspect train.csv
    nb-classifier evaluate train.csv test.csv
    nb-classifier classify train.csv "buy now"
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .classifier import NaiveBayesClassifier
from .config import ClassifierConfig
from .errors import ClassifierError
from .models import EvaluationResult
from .records import CsvRecordSource
from .report import (
    format_number,
    label_summaries,
    render_evaluation_report,
    render_training_report,
    word_parameters,
)
from .vocabulary import VocabularyModel

console = Console()

_OUTPUT_CHOICES = click.Choice(["rich", "json", "plain"])


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/] {escape(message)}", soft_wrap=True)
    sys.exit(1)


def _train(ctx: click.Context, train_file: Path) -> tuple[NaiveBayesClassifier, list[dict[str, str]]]:
    """Train a classifier on *train_file*, returning it with the records read."""
    config: ClassifierConfig = ctx.obj
    source = CsvRecordSource(
        train_file,
        label_field=config.label_field,
        content_field=config.content_field,
    )
    classifier = NaiveBayesClassifier(
        label_field=config.label_field,
        content_field=config.content_field,
    )
    with console.status("[bold blue]Training classifier...", spinner="dots"):
        try:
            records = list(source)
            classifier.train(records)
        except ClassifierError as e:
            _fail(str(e))
    return classifier, records


@click.group()
@click.version_option(package_name="nb-classifier")
@click.option("--label-field", default=None,
              help="CSV column holding the label (env: NB_LABEL_FIELD, default: tag).")
@click.option("--content-field", default=None,
              help="CSV column holding the text (env: NB_CONTENT_FIELD, default: content).")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, label_field: str | None, content_field: str | None,
         verbose: bool) -> None:
    """Naive Bayes text classifier.

    Learns label probabilities from a labelled CSV corpus and predicts
    labels for new documents.
    """
    _setup_logging(verbose)
    try:
        config = ClassifierConfig.from_env()
        if label_field or content_field:
            config = ClassifierConfig(
                label_field=label_field or config.label_field,
                content_field=content_field or config.content_field,
                precision=config.precision,
            )
    except ValueError as e:
        _fail(str(e))
    ctx.obj = config


@main.command()
@click.argument("train_file", type=click.Path(path_type=Path))
@click.option("--output", "-o", type=_OUTPUT_CHOICES, default="rich",
              help="Output format.")
@click.pass_context
def inspect(ctx: click.Context, train_file: Path, output: str) -> None:
    """Train on a file and show the learned classes and parameters.

    Example: nb-classifier inspect train.csv
    """
    config: ClassifierConfig = ctx.obj
    classifier, records = _train(ctx, train_file)
    model = classifier.model

    if output == "json":
        click.echo(json.dumps({
            "trained_on": model.total_documents,
            "vocabulary_size": model.vocabulary_size,
            "classes": [s.to_dict() for s in label_summaries(model)],
            "parameters": [p.to_dict() for p in word_parameters(model)],
        }, indent=2))
    elif output == "plain":
        click.echo(render_training_report(
            model,
            records,
            label_field=config.label_field,
            content_field=config.content_field,
            precision=config.precision,
        ))
    else:
        _render_model(model, train_file.name, config.precision)


@main.command()
@click.argument("train_file", type=click.Path(path_type=Path))
@click.argument("test_file", type=click.Path(path_type=Path))
@click.option("--output", "-o", type=_OUTPUT_CHOICES, default="rich",
              help="Output format.")
@click.pass_context
def evaluate(ctx: click.Context, train_file: Path, test_file: Path, output: str) -> None:
    """Train on one file and report prediction accuracy on another.

    Example: nb-classifier evaluate train.csv test.csv
    """
    config: ClassifierConfig = ctx.obj
    classifier, _ = _train(ctx, train_file)
    test_source = CsvRecordSource(
        test_file,
        label_field=config.label_field,
        content_field=config.content_field,
    )

    with console.status("[bold blue]Evaluating...", spinner="dots"):
        try:
            result = classifier.evaluate(test_source)
        except ClassifierError as e:
            _fail(str(e))

    if output == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif output == "plain":
        click.echo(render_evaluation_report(result, precision=config.precision))
    else:
        _render_evaluation(result, test_file.name, config.precision)


@main.command()
@click.argument("train_file", type=click.Path(path_type=Path))
@click.argument("text")
@click.option("--output", "-o", type=_OUTPUT_CHOICES, default="rich",
              help="Output format.")
@click.pass_context
def classify(ctx: click.Context, train_file: Path, text: str, output: str) -> None:
    """Classify a single piece of text.

    Example: nb-classifier classify train.csv "buy now"
    """
    config: ClassifierConfig = ctx.obj
    classifier, _ = _train(ctx, train_file)
    result = classifier.classify(text)

    if output == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif output == "plain":
        click.echo(
            f"predicted = {result.label}, "
            f"log-probability score = {format_number(result.score, config.precision)}"
        )
    else:
        table = Table(title="Label Scores")
        table.add_column("Label", style="cyan")
        table.add_column("Log-probability", justify="right")
        for label, value in sorted(result.scores.items(), key=lambda x: x[1], reverse=True):
            style = "bold green" if label == result.label else ""
            table.add_row(Text(label, style=style), format_number(value, config.precision))
        console.print(table)
        console.print(Text.assemble("Predicted: ", (result.label, "bold green")))


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_model(model: VocabularyModel, filename: str, precision: int) -> None:
    """Render the trained model's classes and parameters."""
    console.print()
    console.print(Panel(
        Text.assemble(
            (filename, "bold"),
            "\n",
            f"Examples: {model.total_documents} | "
            f"Vocabulary: {model.vocabulary_size} | "
            f"Classes: {len(model.labels)}",
        ),
        title="Naive Bayes Model",
        border_style="blue",
    ))

    classes = Table(title="Classes")
    classes.add_column("Label", style="cyan")
    classes.add_column("Examples", justify="right")
    classes.add_column("Log-prior", justify="right")
    for summary in label_summaries(model):
        classes.add_row(
            Text(summary.label),
            str(summary.document_count),
            format_number(summary.log_prior, precision),
        )
    console.print(classes)

    params = Table(title="Classifier Parameters")
    params.add_column("Label", style="cyan")
    params.add_column("Word", style="white")
    params.add_column("Count", justify="right")
    params.add_column("Log-likelihood", justify="right")
    for param in word_parameters(model):
        params.add_row(
            Text(param.label),
            Text(param.word),
            str(param.count),
            format_number(param.log_likelihood, precision),
        )
    console.print(params)
    console.print()


def _render_evaluation(result: EvaluationResult, filename: str, precision: int) -> None:
    """Render per-record predictions and the accuracy tally."""
    table = Table(title=Text(f"Predictions: {filename}"), show_lines=True)
    table.add_column("#", justify="right", width=4)
    table.add_column("Correct", style="cyan")
    table.add_column("Predicted")
    table.add_column("Score", justify="right")
    table.add_column("Content (excerpt)", max_width=60)

    for i, p in enumerate(result.predictions, 1):
        excerpt = p.content[:120].replace("\n", " ") + ("..." if len(p.content) > 120 else "")
        table.add_row(
            str(i),
            Text(p.true_label),
            Text(p.predicted_label, style="green" if p.is_correct else "bold red"),
            format_number(p.score, precision),
            Text(excerpt),
        )

    console.print(f"Trained on {result.trained_on} examples")
    console.print(table)

    accuracy = result.accuracy
    if accuracy > 0.7:
        style = "bold green"
    elif accuracy > 0.3:
        style = "bold yellow"
    else:
        style = "bold red"
    console.print(
        f"Performance: {result.correct} / {result.total} posts predicted correctly "
        f"([{style}]{accuracy:.0%}[/])"
    )
    console.print()


if __name__ == "__main__":
    main()
