"""Caption Timeline: word-timed caption grouping and per-frame rendering.

WHY: Short-form video captions show a few words at a time, in sync with
the narration. A transcription service only gives a flat list of timed
words; something has to decide how those words are chunked on screen and
which chunk (and which word) is live at any playback instant.

HOW: Three stages: ingest (adapters turn transcription payloads into
TimedWords), group (core builds CaptionGroups once per word list), query
(the engine maps a clock reading plus a style policy to what the caption
area should show). Exporters and the CLI/HTTP surfaces sit on top.

RULES:
- The core is pure: same words + same time + same style = same output
- Validation happens once, at ingestion; per-frame queries never raise
- Presentation settings (alignment, preset) never affect timing
"""

__version__ = "0.1.0"
