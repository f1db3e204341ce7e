"""Tests for the FastAPI caption API.

WHY: Validates that every endpoint behaves correctly (happy paths,
error translation, and edge cases), using FastAPI's TestClient for
synchronous in-process requests.

RULES:
- All tests use the FastAPI TestClient (synchronous)
- Invalid timings must come back as 422 with a readable detail
- /render with no time (or both times) is a 400
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from caption_timeline import __version__
from caption_timeline.server.app import app


@pytest.fixture
def client():
    return TestClient(app)


# ---------------------------------------------------------------------------
# POST /groups
# ---------------------------------------------------------------------------


class TestGroups:

    def test_groups_scenario_a(self, client, scenario_a_items):
        resp = client.post("/groups", json={"words": scenario_a_items})
        assert resp.status_code == 200
        body = resp.json()
        assert [g["text"] for g in body["groups"]] == ["the cat sat down", "quietly"]
        assert body["groups"][1]["start"] == 1400
        assert body["duration_ms"] == 1800

    def test_custom_limits(self, client, scenario_a_items):
        resp = client.post("/groups", json={"words": scenario_a_items, "max_words": 2})
        assert [g["text"] for g in resp.json()["groups"]] == ["the cat", "sat down", "quietly"]

    def test_captions_expanded(self, client):
        resp = client.post("/groups", json={
            "captions": [{"text": "hello big world", "start": 0, "end": 300}],
        })
        assert resp.status_code == 200
        words = resp.json()["groups"][0]["words"]
        assert [(w["text"], w["start"], w["end"]) for w in words] == [
            ("hello", 0, 100), ("big", 100, 200), ("world", 200, 300),
        ]

    def test_empty_request(self, client):
        resp = client.post("/groups", json={})
        assert resp.status_code == 200
        assert resp.json() == {"groups": [], "duration_ms": 0}

    def test_invalid_timing_is_422(self, client):
        resp = client.post("/groups", json={"words": [{"text": "bad", "start": 500, "end": 500}]})
        assert resp.status_code == 422
        assert "not after its start" in resp.json()["detail"]

    def test_whitespace_word_is_422(self, client):
        resp = client.post("/groups", json={"words": [{"text": "two words", "start": 0, "end": 10}]})
        assert resp.status_code == 422

    @pytest.mark.parametrize("body", [
        '{"words": [{"text": "a", "start": 0, "end": Infinity}]}',
        '{"words": [{"text": "a", "start": NaN, "end": 100}]}',
    ])
    def test_non_finite_time_is_422(self, client, body):
        # Sent as raw text: standard JSON encoders refuse to emit NaN/Infinity.
        resp = client.post("/groups", content=body, headers={"content-type": "application/json"})
        assert resp.status_code == 422

    def test_negative_time_rejected_by_schema(self, client):
        resp = client.post("/groups", json={"words": [{"text": "x", "start": -1, "end": 10}]})
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# POST /render
# ---------------------------------------------------------------------------


class TestRender:

    def test_highlight_current_at_650(self, client, scenario_a_items):
        resp = client.post("/render", json={
            "words": scenario_a_items,
            "time_ms": 650,
            "style": "highlight-current",
        })
        assert resp.status_code == 200
        caption = resp.json()["caption"]
        assert caption["text"] == "the cat sat down"
        assert [w["emphasized"] for w in caption["words"]] == [False, False, True, False]
        assert caption["active_word"]["text"] == "sat"
        assert caption["alignment"] == "bottom"
        assert caption["preset"] == "BASIC"

    def test_gap_renders_null(self, client, scenario_a_items):
        resp = client.post("/render", json={"words": scenario_a_items, "time_ms": 1100})
        assert resp.status_code == 200
        assert resp.json() == {"time_ms": 1100, "caption": None}

    def test_frame_conversion(self, client, scenario_a_items):
        resp = client.post("/render", json={
            "words": scenario_a_items,
            "frame": 45,
            "fps": 30,
            "style": "word-by-word",
        })
        body = resp.json()
        assert body["time_ms"] == 1500
        assert body["caption"]["text"] == "quietly"

    def test_word_by_word_in_word_gap(self, client):
        resp = client.post("/render", json={
            "words": [
                {"text": "hello", "start": 0, "end": 300},
                {"text": "there", "start": 350, "end": 600},
            ],
            "time_ms": 320,
            "style": "word-by-word",
        })
        assert resp.json()["caption"] is None

    def test_presentation_options(self, client, scenario_a_items):
        resp = client.post("/render", json={
            "words": scenario_a_items,
            "time_ms": 100,
            "alignment": "top",
            "preset": "WRAP 2",
        })
        caption = resp.json()["caption"]
        assert caption["alignment"] == "top"
        assert caption["preset"] == "WRAP 2"

    def test_missing_time_is_400(self, client, scenario_a_items):
        resp = client.post("/render", json={"words": scenario_a_items})
        assert resp.status_code == 400

    def test_both_times_is_400(self, client, scenario_a_items):
        resp = client.post("/render", json={"words": scenario_a_items, "time_ms": 10, "frame": 1})
        assert resp.status_code == 400

    def test_infinite_time_ms_is_422(self, client):
        body = '{"words": [{"text": "a", "start": 0, "end": 100}], "time_ms": Infinity}'
        resp = client.post("/render", content=body, headers={"content-type": "application/json"})
        assert resp.status_code == 422

    def test_unknown_style_is_422(self, client, scenario_a_items):
        resp = client.post("/render", json={"words": scenario_a_items, "time_ms": 10, "style": "sparkle"})
        assert resp.status_code == 422
        assert "Unknown caption style" in resp.json()["detail"]

    def test_unknown_preset_rejected(self, client, scenario_a_items):
        resp = client.post("/render", json={"words": scenario_a_items, "time_ms": 10, "preset": "NEON"})
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Listing, export, and health
# ---------------------------------------------------------------------------


class TestListings:

    def test_styles(self, client):
        body = client.get("/styles").json()
        assert body["styles"] == ["plain", "highlight-all", "highlight-current", "word-by-word"]
        assert body["alignments"] == ["top", "middle", "bottom"]
        assert "HORMOZI" in body["presets"]

    def test_formats(self, client):
        body = client.get("/formats").json()
        assert {f["key"]: f["suffix"] for f in body} == {
            "srt_captions": "-captions.srt",
            "timeline_json": "-timeline.json",
        }

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "version": __version__}


class TestExport:

    def test_export_srt(self, client, scenario_a_items):
        resp = client.post("/export/srt_captions", json={"words": scenario_a_items})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/x-subrip")
        assert "00:00:01,400 --> 00:00:01,800" in resp.text

    def test_export_timeline(self, client, scenario_a_items):
        resp = client.post("/export/timeline_json", json={"words": scenario_a_items})
        assert resp.status_code == 200
        assert len(resp.json()["groups"]) == 2

    def test_unknown_format_is_404(self, client, scenario_a_items):
        resp = client.post("/export/premiere", json={"words": scenario_a_items})
        assert resp.status_code == 404
