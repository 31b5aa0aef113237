from fastapi import APIRouter, status

from schemas.response_schema import APIResponse
from schemas.transcription import (
    AlignmentRequest,
    ShorthandResultOut,
    ShorthandSubmission,
    TranscriptionAnalysis,
    TypingResultOut,
    TypingSubmission,
)
from services.scoring_service import (
    analyse_transcription,
    score_shorthand_submission,
    score_typing_submission,
)

router = APIRouter(prefix="/results", tags=["Results"])


# ------------------------------
# Score a typing test
# ------------------------------
@router.post("/typing", response_model=APIResponse[TypingResultOut], status_code=status.HTTP_200_OK)
async def score_typing_test(payload: TypingSubmission):
    """
    Aligns the typed text against the reference and returns mistakes,
    gross/net speed and the word-level analysis.
    """
    result = score_typing_submission(payload)
    return APIResponse.ok(result, "Typing test scored successfully")


# ------------------------------
# Score a shorthand (dictation) test
# ------------------------------
@router.post("/shorthand", response_model=APIResponse[ShorthandResultOut], status_code=status.HTTP_200_OK)
async def score_shorthand_test(payload: ShorthandSubmission):
    """
    Returns the mistake count and the Pass/Fail verdict (5% rule).
    """
    result = score_shorthand_submission(payload)
    return APIResponse.ok(result, "Shorthand test scored successfully")


# ------------------------------
# Word-level alignment only
# ------------------------------
@router.post("/alignment", response_model=APIResponse[TranscriptionAnalysis])
async def get_alignment(payload: AlignmentRequest):
    analysis = analyse_transcription(payload)
    return APIResponse.ok(analysis, "Alignment computed")
