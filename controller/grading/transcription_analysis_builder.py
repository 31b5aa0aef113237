from __future__ import annotations

from typing import List, Optional, Sequence

from controller.grading.scoring import count_missing
from controller.grading.text_align import AlignmentEntry, AlignmentStatus
from schemas.transcription import (
    AlignedWordOut,
    AlignmentSummary,
    TranscriptionAnalysis,
)


def _count(alignment: Sequence[AlignmentEntry], status: AlignmentStatus) -> int:
    return sum(1 for entry in alignment if entry.status == status)


def build_transcription_analysis(
    *,
    original_text: str,
    typed_text: str,
    alignment: Sequence[AlignmentEntry],
    attempted: Sequence[AlignmentEntry],
    mistakes: float,
) -> TranscriptionAnalysis:
    aligned_words: List[AlignedWordOut] = []
    original_cursor = -1
    typed_cursor = -1
    attempted_length = len(attempted)

    for position, entry in enumerate(alignment):
        original_idx: Optional[int] = None
        typed_idx: Optional[int] = None
        if entry.original:
            original_cursor += 1
            original_idx = original_cursor
        if entry.typed:
            typed_cursor += 1
            typed_idx = typed_cursor

        aligned_words.append(
            AlignedWordOut(
                typed=entry.typed,
                original=entry.original,
                status=entry.status,
                is_error=entry.is_error,
                original_idx=original_idx,
                typed_idx=typed_idx,
                attempted=position < attempted_length,
            )
        )

    summary = AlignmentSummary(
        matches=_count(alignment, AlignmentStatus.MATCH),
        substitutions=_count(alignment, AlignmentStatus.SUBSTITUTION),
        missing=_count(alignment, AlignmentStatus.MISSING),
        extra=_count(alignment, AlignmentStatus.EXTRA),
        attempted_missing=count_missing(attempted),
        original_words=original_cursor + 1,
        typed_words=typed_cursor + 1,
        attempted_length=attempted_length,
    )

    return TranscriptionAnalysis(
        original_text=original_text,
        typed_text=typed_text,
        mistakes=mistakes,
        aligned_words=aligned_words,
        summary=summary,
    )
