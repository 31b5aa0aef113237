from controller.grading.scoring import score_mistakes
from controller.grading.text_align import AlignmentStatus, align
from controller.grading.transcription_analysis_builder import build_transcription_analysis


def _build(original_text, typed_text):
    alignment = align(original_text, typed_text)
    mistakes, attempted = score_mistakes(alignment)
    return build_transcription_analysis(
        original_text=original_text,
        typed_text=typed_text,
        alignment=alignment,
        attempted=attempted,
        mistakes=mistakes,
    )


def test_build_transcription_analysis_substitution():
    analysis = _build("red car is fast", "red bus is fast")

    assert analysis.mistakes == 1.0
    assert analysis.summary.matches == 3
    assert analysis.summary.substitutions == 1
    assert analysis.summary.missing == 0
    assert analysis.summary.extra == 0
    assert analysis.summary.original_words == 4
    assert analysis.summary.typed_words == 4

    sub = analysis.aligned_words[1]
    assert sub.status == AlignmentStatus.SUBSTITUTION
    assert sub.is_error
    assert sub.original_idx == 1
    assert sub.typed_idx == 1


def test_build_transcription_analysis_marks_unattempted_tail():
    analysis = _build("the quick brown fox jumps", "the quick brown fox")

    assert analysis.summary.missing == 1
    assert analysis.summary.attempted_missing == 0
    assert analysis.summary.attempted_length == 4
    assert analysis.aligned_words[-1].attempted is False
    assert analysis.aligned_words[-1].typed_idx is None
    assert analysis.aligned_words[-1].original_idx == 4
    assert all(word.attempted for word in analysis.aligned_words[:4])


def test_build_transcription_analysis_serializes_camel_case():
    dumped = _build("one two", "one three two").model_dump(by_alias=True)
    assert "alignedWords" in dumped
    assert dumped["alignedWords"][1]["status"] == "extra"
    assert dumped["alignedWords"][1]["isError"] is True
    assert dumped["alignedWords"][1]["originalIdx"] is None
    assert dumped["summary"]["typedWords"] == 3
