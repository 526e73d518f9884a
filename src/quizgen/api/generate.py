"""API router exposing question generation and CSV export endpoints."""
from __future__ import annotations

import asyncio
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from quizgen.config import QuizGenConfig
from quizgen.errors import ExtractionTimeout, InvalidInput
from quizgen.export import export_filename, questions_to_csv
from quizgen.generation.models import Question, ResultSet
from quizgen.ingest.models import SourceDocument
from quizgen.services.pipeline import QuestionPipeline

router = APIRouter(prefix="/api", tags=["questions"])


class GenerateResponse(BaseModel):
    """Response payload for the generate endpoint."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_used: str = Field(..., alias="modelUsed")
    questions: List[Question]


class ExportRequest(BaseModel):
    """Request body accepted by the export endpoint."""

    category: str = ""
    questions: List[Question]


class ModelsResponse(BaseModel):
    models: List[str]
    default: str


def get_config(request: Request) -> QuizGenConfig:
    """FastAPI dependency returning the application's configuration."""

    return request.app.state.config


def get_pipeline(request: Request) -> QuestionPipeline:
    """FastAPI dependency returning the shared :class:`QuestionPipeline`."""

    return request.app.state.pipeline


def _parse_count(raw: Optional[str]) -> int:
    try:
        count = int((raw or "").strip())
    except ValueError as exc:
        raise InvalidInput("Invalid count") from exc
    if count < 1:
        raise InvalidInput("Invalid count")
    return count


async def _read_upload(upload: UploadFile, timeout: float) -> SourceDocument:
    try:
        data = await asyncio.wait_for(upload.read(), timeout)
    except asyncio.TimeoutError as exc:
        raise ExtractionTimeout(f"Reading the upload timed out after {timeout:g}s") from exc
    return SourceDocument(file_name=upload.filename or "", data=data)


@router.post("/generate", response_model=GenerateResponse)
async def generate_questions(
    file: Optional[UploadFile] = File(None),
    count: Optional[str] = Form(None),
    model: Optional[str] = Form(None),
    pipeline: QuestionPipeline = Depends(get_pipeline),
) -> GenerateResponse:
    """Generate multiple-choice questions from an uploaded PDF or DOCX file."""

    started_at = pipeline.clock()
    if file is None or not file.filename:
        raise InvalidInput("No file uploaded")
    requested_count = _parse_count(count)

    document = await _read_upload(file, pipeline.config.extraction_timeout)
    result: ResultSet = await pipeline.run(document, requested_count, model, started_at=started_at)
    return GenerateResponse(model_used=result.model_used, questions=result.questions)


@router.post("/export")
def export_questions(request: ExportRequest) -> Response:
    """Render the supplied questions as a downloadable CSV file."""

    content = questions_to_csv(request.questions, request.category)
    filename = export_filename(request.category)
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/models", response_model=ModelsResponse)
def list_models(config: QuizGenConfig = Depends(get_config)) -> ModelsResponse:
    """List the models a caller may request."""

    return ModelsResponse(models=list(config.allowed_models), default=config.default_model)
