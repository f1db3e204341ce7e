"""Unit tests for the caption exporters.

WHY: Exported files are consumed by editors and renderers outside this
package. SRT cues must match group timing exactly; the timeline JSON must
validate against its schema and carry every word.
"""

import json
from pathlib import Path

import jsonschema

from caption_timeline.core.grouping import group_words
from caption_timeline.core.ir import CaptionGroup, TimedWord
from caption_timeline.formatters import FORMATTERS
from caption_timeline.formatters.srt_captions import SRTCaptionFormatter, ms_to_srt_time
from caption_timeline.formatters.timeline_json import TimelineJSONFormatter

SCHEMA_PATH = (
    Path(__file__).resolve().parent.parent
    / "caption_timeline" / "schemas" / "caption_timeline.schema.json"
)


def _load_schema():
    with open(SCHEMA_PATH) as f:
        return json.load(f)


class TestRegistry:

    def test_registered_keys(self):
        assert set(FORMATTERS) == {"srt_captions", "timeline_json"}


class TestSRTCaptionFormatter:

    def test_one_cue_per_group(self, scenario_a_words):
        outputs = SRTCaptionFormatter().format(group_words(scenario_a_words))
        assert len(outputs) == 1
        assert outputs[0].suffix == "-captions.srt"
        assert outputs[0].media_type == "application/x-subrip"
        assert outputs[0].content == (
            "1\n"
            "00:00:00,000 --> 00:00:01,000\n"
            "the cat sat down\n"
            "\n"
            "2\n"
            "00:00:01,400 --> 00:00:01,800\n"
            "quietly\n"
        )

    def test_empty_groups(self):
        assert SRTCaptionFormatter().format([])[0].content == ""

    def test_timestamp_formatting(self):
        assert ms_to_srt_time(0) == "00:00:00,000"
        assert ms_to_srt_time(3_723_004) == "01:02:03,004"
        assert ms_to_srt_time(1499.6) == "00:00:01,500"


class TestTimelineJSONFormatter:

    def test_validates_against_schema(self, scenario_a_words):
        outputs = TimelineJSONFormatter().format(group_words(scenario_a_words))
        data = json.loads(outputs[0].content)
        jsonschema.validate(instance=data, schema=_load_schema())
        assert outputs[0].suffix == "-timeline.json"

    def test_carries_groups_and_words(self, scenario_a_words):
        groups = group_words(scenario_a_words)
        data = json.loads(TimelineJSONFormatter().format(groups)[0].content)

        assert data["duration_ms"] == 1800
        assert [g["text"] for g in data["groups"]] == ["the cat sat down", "quietly"]
        assert data["groups"][0]["words"][2] == {"text": "sat", "start": 500, "end": 700}
        rebuilt = [
            CaptionGroup.from_words(tuple(TimedWord(**w) for w in g["words"]))
            for g in data["groups"]
        ]
        assert rebuilt == groups

    def test_empty_groups(self):
        data = json.loads(TimelineJSONFormatter().format([])[0].content)
        assert data["groups"] == []
        assert data["duration_ms"] == 0
