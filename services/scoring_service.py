from __future__ import annotations

import logging

from fastapi import HTTPException, status

from controller.grading.scoring import (
    format_speed,
    outcome_for,
    score_mistakes,
    shorthand_metrics,
    typing_metrics,
)
from controller.grading.text_align import align, tokenize
from controller.grading.transcription_analysis_builder import build_transcription_analysis
from core.settings import get_settings
from schemas.transcription import (
    AlignmentRequest,
    ShorthandMetricsOut,
    ShorthandResultOut,
    ShorthandSubmission,
    TranscriptionAnalysis,
    TypingMetricsOut,
    TypingResultOut,
    TypingSubmission,
)

logger = logging.getLogger(__name__)


def _ensure_within_limit(original_text: str, typed_text: str) -> None:
    max_words = get_settings().max_words
    original_count = len(tokenize(original_text))
    typed_count = len(tokenize(typed_text))
    if original_count > max_words or typed_count > max_words:
        logger.warning(
            "Rejected oversized submission original_words=%s typed_words=%s limit=%s",
            original_count,
            typed_count,
            max_words,
        )
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Input too large: at most {max_words} words are scored per text.",
        )


def analyse_transcription(payload: AlignmentRequest) -> TranscriptionAnalysis:
    _ensure_within_limit(payload.original_text, payload.typed_text)
    alignment = align(payload.original_text, payload.typed_text)
    mistakes, attempted = score_mistakes(alignment)
    return build_transcription_analysis(
        original_text=payload.original_text,
        typed_text=payload.typed_text,
        alignment=alignment,
        attempted=attempted,
        mistakes=mistakes,
    )


def score_typing_submission(payload: TypingSubmission) -> TypingResultOut:
    _ensure_within_limit(payload.original_text, payload.typed_text)
    metrics = typing_metrics(
        payload.original_text,
        payload.typed_text,
        payload.minutes,
        payload.backspaces,
    )
    result = outcome_for(metrics.mistakes, metrics.words)
    logger.info(
        "Scored typing submission words=%s mistakes=%s gross=%.2f net=%.2f result=%s",
        metrics.words,
        metrics.mistakes,
        metrics.gross_speed,
        metrics.net_speed,
        result.value,
    )

    return TypingResultOut(
        content_title=payload.content_title,
        language=payload.language,
        time=payload.minutes,
        metrics=TypingMetricsOut(
            words=metrics.words,
            mistakes=metrics.mistakes,
            gross_speed=format_speed(metrics.gross_speed),
            net_speed=format_speed(metrics.net_speed),
            backspaces=metrics.backspaces,
            missing_words=metrics.missing_words,
        ),
        result=result,
        analysis=build_transcription_analysis(
            original_text=payload.original_text,
            typed_text=payload.typed_text,
            alignment=metrics.alignment,
            attempted=metrics.attempted_alignment,
            mistakes=metrics.mistakes,
        ),
    )


def score_shorthand_submission(payload: ShorthandSubmission) -> ShorthandResultOut:
    _ensure_within_limit(payload.original_text, payload.typed_text)
    metrics = shorthand_metrics(payload.original_text, payload.typed_text, payload.minutes)
    logger.info(
        "Scored shorthand submission words=%s mistakes=%s result=%s",
        metrics.words,
        metrics.mistakes,
        metrics.result.value,
    )

    return ShorthandResultOut(
        content_title=payload.content_title,
        language=payload.language,
        time=payload.minutes,
        metrics=ShorthandMetricsOut(
            words=metrics.words,
            mistakes=metrics.mistakes,
            result=metrics.result,
            missing_words=metrics.missing_words,
        ),
        result=metrics.result,
        analysis=build_transcription_analysis(
            original_text=payload.original_text,
            typed_text=payload.typed_text,
            alignment=metrics.alignment,
            attempted=metrics.attempted_alignment,
            mistakes=metrics.mistakes,
        ),
    )
