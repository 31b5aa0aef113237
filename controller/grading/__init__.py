from controller.grading.scoring import (
    Outcome,
    ShorthandMetrics,
    TypingMetrics,
    format_speed,
    score_mistakes,
    shorthand_metrics,
    typing_metrics,
)
from controller.grading.text_align import (
    AlignmentEntry,
    AlignmentStatus,
    align,
    tokenize,
)


__all__ = [
    "AlignmentEntry",
    "AlignmentStatus",
    "Outcome",
    "ShorthandMetrics",
    "TypingMetrics",
    "align",
    "format_speed",
    "score_mistakes",
    "shorthand_metrics",
    "tokenize",
    "typing_metrics",
]
