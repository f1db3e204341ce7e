"""Unit tests for the caption style renderers.

WHY: Each style has to reproduce its row of the style matrix exactly,
including the cells that deliberately render nothing. A renderer that
falls back to "show something" would put stale words on screen.

HOW: Every renderer is called directly with (group, word) combinations
covering the three columns: word active, group active without a word,
no group.
"""

import pytest

from caption_timeline.core.grouping import group_words
from caption_timeline.styles import STYLES, Alignment, Preset, StylePolicy, get_style


@pytest.fixture
def group(scenario_a_words):
    return group_words(scenario_a_words)[0]


@pytest.fixture
def sat(group):
    return group.words[2]


class TestRegistry:

    def test_every_policy_registered(self):
        assert set(STYLES) == set(StylePolicy)
        for policy, renderer in STYLES.items():
            assert renderer.policy is policy

    def test_legacy_names(self):
        assert StylePolicy.parse("default") is StylePolicy.PLAIN
        assert StylePolicy.parse("highlightEachWord") is StylePolicy.HIGHLIGHT_ALL
        assert StylePolicy.parse("highlightSpokenWord") is StylePolicy.HIGHLIGHT_CURRENT
        assert StylePolicy.parse("wordByWord") is StylePolicy.WORD_BY_WORD

    def test_parse_canonical_and_enum(self):
        assert StylePolicy.parse("word-by-word") is StylePolicy.WORD_BY_WORD
        assert StylePolicy.parse(StylePolicy.PLAIN) is StylePolicy.PLAIN

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown caption style"):
            get_style("sparkle")


class TestNoActiveGroup:

    @pytest.mark.parametrize("policy", list(StylePolicy))
    def test_renders_nothing(self, policy):
        assert STYLES[policy].render(None, None) is None


class TestPlain:

    def test_with_active_word(self, group, sat):
        caption = STYLES[StylePolicy.PLAIN].render(group, sat)
        assert caption.text == "the cat sat down"
        assert not any(w.emphasized for w in caption.words)

    def test_without_active_word(self, group):
        caption = STYLES[StylePolicy.PLAIN].render(group, None)
        assert caption.text == "the cat sat down"
        assert not any(w.emphasized for w in caption.words)


class TestHighlightAll:

    def test_with_active_word(self, group, sat):
        caption = STYLES[StylePolicy.HIGHLIGHT_ALL].render(group, sat)
        assert [w.text for w in caption.words] == ["the", "cat", "sat", "down"]
        assert all(w.emphasized for w in caption.words)

    def test_without_active_word(self, group):
        caption = STYLES[StylePolicy.HIGHLIGHT_ALL].render(group, None)
        assert all(w.emphasized for w in caption.words)


class TestHighlightCurrent:

    def test_only_active_word_emphasized(self, group, sat):
        caption = STYLES[StylePolicy.HIGHLIGHT_CURRENT].render(group, sat)
        assert caption.text == "the cat sat down"
        assert [w.emphasized for w in caption.words] == [False, False, True, False]

    def test_without_active_word_all_plain(self, group):
        caption = STYLES[StylePolicy.HIGHLIGHT_CURRENT].render(group, None)
        assert caption.text == "the cat sat down"
        assert not any(w.emphasized for w in caption.words)


class TestWordByWord:

    def test_shows_only_active_word(self, group, sat):
        caption = STYLES[StylePolicy.WORD_BY_WORD].render(group, sat)
        assert caption.text == "sat"
        assert len(caption.words) == 1

    def test_without_active_word_renders_nothing(self, group):
        assert STYLES[StylePolicy.WORD_BY_WORD].render(group, None) is None


class TestPresentationPassThrough:

    def test_alignment_and_preset_carried(self, group, sat):
        caption = STYLES[StylePolicy.PLAIN].render(group, sat, Alignment.TOP, Preset.WRAP_1)
        assert caption.alignment is Alignment.TOP
        assert caption.preset is Preset.WRAP_1
        assert caption.to_dict()["preset"] == "WRAP 1"

    def test_to_dict_shape(self, group, sat):
        data = STYLES[StylePolicy.HIGHLIGHT_CURRENT].render(group, sat).to_dict()
        assert data["style"] == "highlight-current"
        assert data["active_word"] == {"text": "sat", "start": 500, "end": 700}
        assert data["group"] == {"text": "the cat sat down", "start": 0, "end": 1000}
        assert data["alignment"] == "bottom"
