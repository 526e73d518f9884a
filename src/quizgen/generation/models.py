"""Data models shared by the generation stage."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Question(BaseModel):
    """A multiple-choice question with four options and one correct answer."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=4, max_length=4)
    correct_index: int = Field(..., alias="correctIndex", ge=0, le=3)

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be blank")
        return value

    @model_validator(mode="after")
    def _correct_option_present(self) -> "Question":
        if not self.options[self.correct_index].strip():
            raise ValueError("correctIndex must point to a non-empty option")
        return self

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]

    def searchable_text(self) -> str:
        return " ".join([self.question, *self.options]).lower()


@dataclass(slots=True)
class GenerationRequest:
    """Work item for one chunk: its text, target count and model."""

    chunk_index: int
    chunk_text: str
    target_count: int
    model: str


@dataclass(slots=True)
class GenerationOutcome:
    """Raw candidates accumulated across processed chunks."""

    candidates: List[Any] = field(default_factory=list)
    model_used: str = ""
    chunks_total: int = 0
    chunks_processed: int = 0
    desired_total: int = 0
    stopped_early: bool = False


@dataclass(slots=True)
class ResultSet:
    """Final questions returned to the caller."""

    model_used: str
    questions: List[Question]
    chunks_total: int = 0
    chunks_processed: int = 0
    stopped_early: bool = False
