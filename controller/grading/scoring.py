import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple

from controller.grading.text_align import (
    AlignmentEntry,
    AlignmentStatus,
    align,
    tokenize,
)


MISSING_PENALTY = 1.0
MISSING_BEFORE_COMMA_PENALTY = 1.25
EXTRA_PENALTY = 1.0
WRONG_WORD_PENALTY = 1.0
COMMA_PENALTY = 0.25
PERIOD_PENALTY = 1.0

PASS_MISTAKE_PERCENTAGE = 5


class Outcome(str, Enum):
    PASS = "Pass"
    FAIL = "Fail"


@dataclass
class TypingMetrics:
    words: int
    mistakes: float
    gross_speed: float
    net_speed: float
    backspaces: int
    missing_words: int
    alignment: List[AlignmentEntry] = field(default_factory=list)
    attempted_alignment: List[AlignmentEntry] = field(default_factory=list)


@dataclass
class ShorthandMetrics:
    words: int
    mistakes: float
    result: Outcome
    missing_words: int
    alignment: List[AlignmentEntry] = field(default_factory=list)
    attempted_alignment: List[AlignmentEntry] = field(default_factory=list)


def attempted_alignment(alignment: Sequence[AlignmentEntry]) -> List[AlignmentEntry]:
    for idx in range(len(alignment) - 1, -1, -1):
        if alignment[idx].typed:
            return list(alignment[: idx + 1])
    return []


def _clean(word: str) -> str:
    return word.replace(".", "").replace(",", "").lower()


def _substitution_penalty(original: str, typed: str) -> float:
    if _clean(original) != _clean(typed):
        return WRONG_WORD_PENALTY
    penalty = 0.0
    if original.endswith(",") != typed.endswith(","):
        penalty += COMMA_PENALTY
    if original.endswith(".") != typed.endswith("."):
        penalty += PERIOD_PENALTY
    return penalty


def score_mistakes(alignment: Sequence[AlignmentEntry]) -> Tuple[float, List[AlignmentEntry]]:
    """Count mistakes over the part of the alignment the student reached.

    Trailing missing words after the last typed word are not penalised.
    Penalties are multiples of 0.25, so the float sum is exact.
    """
    attempted = attempted_alignment(alignment)
    mistakes = 0.0
    for entry in attempted:
        if entry.status == AlignmentStatus.MISSING:
            if entry.original.endswith(","):
                mistakes += MISSING_BEFORE_COMMA_PENALTY
            else:
                mistakes += MISSING_PENALTY
        elif entry.status == AlignmentStatus.EXTRA:
            mistakes += EXTRA_PENALTY
        elif entry.status == AlignmentStatus.SUBSTITUTION:
            mistakes += _substitution_penalty(entry.original, entry.typed)
    return mistakes, attempted


def count_missing(alignment: Sequence[AlignmentEntry]) -> int:
    return sum(1 for entry in alignment if entry.status == AlignmentStatus.MISSING)


def outcome_for(mistakes: float, words: int) -> Outcome:
    mistake_percentage = (mistakes / words) * 100 if words > 0 else 0
    return Outcome.PASS if mistake_percentage <= PASS_MISTAKE_PERCENTAGE else Outcome.FAIL


def net_speed(words: int, mistakes: float, minutes: float) -> float:
    if minutes <= 0:
        return 0.0
    if mistakes > minutes:
        # every mistake beyond one per minute costs a word for each minute
        penalty = (mistakes - minutes) * minutes
        speed = (words - penalty) / minutes
    else:
        speed = words / minutes
    return max(0.0, speed)


def format_speed(speed: float) -> str:
    """Render a speed with at most two decimals, dropping ``.00``.

    A near-zero duration can overflow the speed to infinity; that renders as
    ``"Infinity"`` and NaN renders as ``"0"``.
    """
    if not math.isfinite(speed):
        return "Infinity" if speed > 0 else "0"
    rounded = math.floor(speed * 100 + 0.5) / 100
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}"


def typing_metrics(
    original_text: str,
    typed_text: str,
    minutes: float,
    backspaces: int = 0,
) -> TypingMetrics:
    alignment = align(original_text, typed_text)
    mistakes, attempted = score_mistakes(alignment)
    words = len(tokenize(typed_text))
    gross = words / minutes if minutes > 0 else 0.0

    return TypingMetrics(
        words=words,
        mistakes=mistakes,
        gross_speed=gross,
        net_speed=net_speed(words, mistakes, minutes),
        backspaces=backspaces,
        missing_words=count_missing(attempted),
        alignment=alignment,
        attempted_alignment=attempted,
    )


def shorthand_metrics(
    original_text: str,
    typed_text: str,
    minutes: float,
) -> ShorthandMetrics:
    # minutes does not affect the verdict
    alignment = align(original_text, typed_text)
    mistakes, attempted = score_mistakes(alignment)
    words = len(tokenize(typed_text))

    return ShorthandMetrics(
        words=words,
        mistakes=mistakes,
        result=outcome_for(mistakes, words),
        missing_words=count_missing(attempted),
        alignment=alignment,
        attempted_alignment=attempted,
    )
