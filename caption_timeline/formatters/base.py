"""Abstract base formatter and output container.

WHY: Every export format consumes the same caption groups but produces
different file content. This base class gives the CLI and HTTP API one
interface to work with any exporter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput bundles a file suffix with its
content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list, one item for every current exporter,
  but multi-file exporters are allowed
- ``suffix`` starts with a hyphen, e.g. ``"-captions.srt"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence, Union

from caption_timeline.core.ir import CaptionGroup


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-captions.srt"`` → ``"narration-captions.srt"``.
        content: The file content as a string or bytes.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: Union[str, bytes]
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all caption exporters.

    To add a new export format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SRT Captions'."""

    @abstractmethod
    def format(self, groups: Sequence[CaptionGroup]) -> List[FormatterOutput]:
        """Convert caption groups into one or more output files.

        Args:
            groups: Caption groups in display order, as built by the engine.

        Returns:
            List of FormatterOutput objects.
        """
