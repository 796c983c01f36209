"""Heuristic two-speaker diarization of a flat transcript.

This is a placeholder for real speaker clustering: sentences are attributed
to ``Speaker 1`` / ``Speaker 2`` by a length threshold plus a random tie-break,
and timestamps are estimated from sentence length rather than audio timing.
"""

from __future__ import annotations

import random
import re

from src.diarization.models import TranscriptSegment
from src.diarization.timing import format_timestamp

# A sentence longer than this always hands the turn to the other speaker
SWITCH_LENGTH_THRESHOLD = 50
# Draws above this probability also hand the turn over
SWITCH_PROBABILITY_THRESHOLD = 0.7
# Estimated speaking time per character
SECONDS_PER_CHAR = 0.1

_SENTENCE_BREAK_RE = re.compile(r"[.!?]+")


def split_sentences(transcript: str) -> list[str]:
    """Split *transcript* on runs of terminal punctuation.

    Returns trimmed sentence-like units; empty and whitespace-only units are
    dropped.
    """
    parts = (part.strip() for part in _SENTENCE_BREAK_RE.split(transcript))
    return [part for part in parts if part]


def _other_speaker(speaker: int) -> int:
    return 2 if speaker == 1 else 1


def segment_transcript(
    transcript: str,
    rng: random.Random | None = None,
) -> list[TranscriptSegment]:
    """Attribute each sentence of *transcript* to one of two speakers.

    The speaker switch is decided *after* a sentence is emitted, using that
    sentence's length, so it affects the following sentence. The first
    sentence never triggers a switch.

    Args:
        transcript: Flat transcript text, e.g. the ``text`` field of a Whisper
            response.
        rng: Random source for the switch tie-break. Pass a seeded
            ``random.Random`` for reproducible output; defaults to a fresh,
            unseeded generator.

    Returns:
        Segments in appearance order. Empty when the transcript contains no
        sentence-like content.
    """
    if rng is None:
        rng = random.Random()

    segments: list[TranscriptSegment] = []
    current_speaker = 1
    offset = 0.0

    for i, sentence in enumerate(split_sentences(transcript)):
        segments.append(
            TranscriptSegment(
                speaker=f"Speaker {current_speaker}",
                text=sentence,
                timestamp=format_timestamp(offset),
            )
        )

        if i > 0 and (
            len(sentence) > SWITCH_LENGTH_THRESHOLD
            or rng.random() > SWITCH_PROBABILITY_THRESHOLD
        ):
            current_speaker = _other_speaker(current_speaker)

        offset += len(sentence) * SECONDS_PER_CHAR

    return segments
