"""Runtime configuration loaded from the environment.

Values come from environment variables, optionally seeded from a
``.env`` file in the working directory:

- ``NB_LABEL_FIELD``: CSV column holding the label (default ``tag``)
- ``NB_CONTENT_FIELD``: CSV column holding the text (default ``content``)
- ``NB_PRECISION``: significant digits in plain-text reports (default ``3``)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@dataclass
class ClassifierConfig:
    """Settings shared by the command-line tools."""

    label_field: str = "tag"
    content_field: str = "content"
    precision: int = 3

    def __post_init__(self) -> None:
        if not self.label_field or not self.content_field:
            raise ValueError("label_field and content_field must be non-empty")
        if self.label_field == self.content_field:
            raise ValueError("label_field and content_field must differ")
        if not 1 <= self.precision <= 17:
            raise ValueError("precision must be between 1 and 17")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ClassifierConfig":
        """Build a config from ``NB_*`` environment variables."""
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))
        defaults = cls()

        raw_precision = os.getenv("NB_PRECISION")
        try:
            precision = int(raw_precision) if raw_precision else defaults.precision
        except ValueError as exc:
            raise ValueError(f"NB_PRECISION must be an integer, got {raw_precision!r}") from exc

        return cls(
            label_field=os.getenv("NB_LABEL_FIELD") or defaults.label_field,
            content_field=os.getenv("NB_CONTENT_FIELD") or defaults.content_field,
            precision=precision,
        )
