"""Style policies, presentation enums, and the rendered caption container.

WHY: The hosting UI picks one of four caption styles. Each style is a
different answer to "given the active group and the active word, what
text is shown and which words are emphasized?". Keeping the styles as a
closed enum with one renderer each replaces scattered string comparisons
with a single dispatch table.

HOW: StylePolicy is the closed set of styles. BaseStyle is an ABC whose
render() handles the shared "no active group" case and delegates the rest
to render_words(). RenderedCaption bundles what the surface should paint,
plus the alignment and preset it should paint it with.

RULES:
- render() returns None when nothing should be rendered
- render_words() returns None to mean "nothing shown even though a
  group is active" (word-by-word between words)
- Alignment and Preset are passed through untouched
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from caption_timeline.core.ir import CaptionGroup, TimedWord


class StylePolicy(str, Enum):
    """Which words are shown and emphasized for the active group."""

    PLAIN = "plain"
    HIGHLIGHT_ALL = "highlight-all"
    HIGHLIGHT_CURRENT = "highlight-current"
    WORD_BY_WORD = "word-by-word"

    @classmethod
    def parse(cls, value: str) -> "StylePolicy":
        """Parse a style name, accepting the camelCase names older clients send.

        Raises:
            ValueError: If the name matches no style.
        """
        if isinstance(value, cls):
            return value
        key = value.strip()
        key = _LEGACY_STYLE_NAMES.get(key, key)
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(
                "Unknown caption style '{}'. Available: {}".format(
                    value, ", ".join(s.value for s in cls)
                )
            ) from None


_LEGACY_STYLE_NAMES = {
    "default": "plain",
    "highlightEachWord": "highlight-all",
    "highlightSpokenWord": "highlight-current",
    "wordByWord": "word-by-word",
}


class Alignment(str, Enum):
    """Vertical placement of the caption area."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class Preset(str, Enum):
    """Visual theme for the caption area."""

    BASIC = "BASIC"
    REVID = "REVID"
    HORMOZI = "HORMOZI"
    WRAP_1 = "WRAP 1"
    WRAP_2 = "WRAP 2"
    FACELESS = "FACELESS"
    ALL = "ALL"


@dataclass(frozen=True)
class RenderedWord:
    text: str
    emphasized: bool = False


@dataclass(frozen=True)
class RenderedCaption:
    """What the caption area should paint at one instant.

    Attributes:
        style: The policy that produced this caption.
        text: Shown words joined by single spaces.
        words: Shown words in order, each with its emphasis flag.
        group: The active caption group.
        active_word: The word being spoken, or None between words.
        alignment: Vertical placement chosen by the host UI.
        preset: Visual theme chosen by the host UI.
    """

    style: StylePolicy
    text: str
    words: Tuple[RenderedWord, ...]
    group: CaptionGroup
    active_word: Optional[TimedWord]
    alignment: Alignment = Alignment.BOTTOM
    preset: Preset = Preset.BASIC

    def to_dict(self) -> dict:
        """JSON-ready view used by the CLI and exporters."""
        return {
            "style": self.style.value,
            "text": self.text,
            "words": [
                {"text": w.text, "emphasized": w.emphasized} for w in self.words
            ],
            "group": {
                "text": self.group.text,
                "start": self.group.start,
                "end": self.group.end,
            },
            "active_word": (
                None if self.active_word is None else {
                    "text": self.active_word.text,
                    "start": self.active_word.start,
                    "end": self.active_word.end,
                }
            ),
            "alignment": self.alignment.value,
            "preset": self.preset.value,
        }


class BaseStyle(ABC):
    """Abstract base for the four caption style renderers.

    To add a style:
    1. Add a member to StylePolicy
    2. Subclass BaseStyle and implement ``policy`` and render_words()
    3. Register it in STYLES in styles/__init__.py
    """

    @property
    @abstractmethod
    def policy(self) -> StylePolicy:
        """The StylePolicy member this renderer implements."""

    @abstractmethod
    def render_words(
        self,
        group: CaptionGroup,
        active_word: Optional[TimedWord],
    ) -> Optional[List[RenderedWord]]:
        """Decide which words of the active group are shown and emphasized.

        Returns:
            The shown words, or None when nothing should be shown.
        """

    def render(
        self,
        group: Optional[CaptionGroup],
        active_word: Optional[TimedWord],
        alignment: Alignment = Alignment.BOTTOM,
        preset: Preset = Preset.BASIC,
    ) -> Optional[RenderedCaption]:
        if group is None:
            return None
        words = self.render_words(group, active_word)
        if words is None:
            return None
        return RenderedCaption(
            style=self.policy,
            text=" ".join(w.text for w in words),
            words=tuple(words),
            group=group,
            active_word=active_word,
            alignment=alignment,
            preset=preset,
        )
