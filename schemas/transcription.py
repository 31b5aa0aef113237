from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field

from controller.grading.scoring import Outcome
from controller.grading.text_align import AlignmentStatus


class SubmissionBase(BaseModel):
    original_text: str = Field(
        ...,
        validation_alias=AliasChoices("original_text", "originalText"),
        serialization_alias="originalText",
    )
    typed_text: str = Field(
        default="",
        validation_alias=AliasChoices("typed_text", "typedText"),
        serialization_alias="typedText",
    )
    minutes: float = Field(..., ge=0, description="Allotted duration of the test in minutes")
    language: Literal["english", "hindi"] = "english"
    content_title: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("content_title", "contentTitle"),
        serialization_alias="contentTitle",
    )

    model_config = {"populate_by_name": True}


class TypingSubmission(SubmissionBase):
    backspaces: int = Field(default=0, ge=0)


class ShorthandSubmission(SubmissionBase):
    pass


class AlignmentRequest(BaseModel):
    original_text: str = Field(
        ...,
        validation_alias=AliasChoices("original_text", "originalText"),
        serialization_alias="originalText",
    )
    typed_text: str = Field(
        default="",
        validation_alias=AliasChoices("typed_text", "typedText"),
        serialization_alias="typedText",
    )

    model_config = {"populate_by_name": True}


class AlignedWordOut(BaseModel):
    typed: str
    original: str
    status: AlignmentStatus
    is_error: bool = Field(serialization_alias="isError")
    original_idx: Optional[int] = Field(default=None, serialization_alias="originalIdx")
    typed_idx: Optional[int] = Field(default=None, serialization_alias="typedIdx")
    attempted: bool = True


class AlignmentSummary(BaseModel):
    matches: int
    substitutions: int
    missing: int
    extra: int
    attempted_missing: int = Field(serialization_alias="attemptedMissing")
    original_words: int = Field(serialization_alias="originalWords")
    typed_words: int = Field(serialization_alias="typedWords")
    attempted_length: int = Field(serialization_alias="attemptedLength")


class TranscriptionAnalysis(BaseModel):
    original_text: str = Field(serialization_alias="originalText")
    typed_text: str = Field(serialization_alias="typedText")
    mistakes: float
    aligned_words: List[AlignedWordOut] = Field(serialization_alias="alignedWords")
    summary: AlignmentSummary


class TypingMetricsOut(BaseModel):
    words: int
    mistakes: float
    gross_speed: str = Field(serialization_alias="grossSpeed")
    net_speed: str = Field(serialization_alias="netSpeed")
    backspaces: int
    missing_words: int = Field(serialization_alias="missingWords")


class ShorthandMetricsOut(BaseModel):
    words: int
    mistakes: float
    result: Outcome
    missing_words: int = Field(serialization_alias="missingWords")


class TypingResultOut(BaseModel):
    content_type: Literal["typing"] = Field(default="typing", serialization_alias="contentType")
    content_title: Optional[str] = Field(default=None, serialization_alias="contentTitle")
    language: str
    time: float
    metrics: TypingMetricsOut
    result: Outcome
    analysis: TranscriptionAnalysis


class ShorthandResultOut(BaseModel):
    content_type: Literal["shorthand"] = Field(default="shorthand", serialization_alias="contentType")
    content_title: Optional[str] = Field(default=None, serialization_alias="contentTitle")
    language: str
    time: float
    metrics: ShorthandMetricsOut
    result: Outcome
    analysis: TranscriptionAnalysis
