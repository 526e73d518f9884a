import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from quizgen.api.generate import router as generate_router
from quizgen.config import QuizGenConfig
from quizgen.errors import QuizGenError
from quizgen.llm import LLMClient, create_llm_client
from quizgen.logging_config import configure_logging
from quizgen.services.pipeline import QuestionPipeline
from quizgen.telemetry import emit_exception

configure_logging()

LOGGER = logging.getLogger(__name__)


async def _handle_quizgen_error(request: Request, exc: QuizGenError) -> JSONResponse:
    level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    LOGGER.log(level, "%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    LOGGER.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse({"error": "Invalid request"}, status_code=400)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    emit_exception(module=__name__, error=exc)
    return JSONResponse({"error": "Server error"}, status_code=500)


def create_app(config: Optional[QuizGenConfig] = None, llm: Optional[LLMClient] = None) -> FastAPI:
    """Build the FastAPI application around a single read-only configuration."""

    config = config or QuizGenConfig.from_env()
    app = FastAPI(title="Quiz Generator API")
    app.state.config = config
    app.state.pipeline = QuestionPipeline(config, llm or create_llm_client(config))
    app.include_router(generate_router)

    app.add_exception_handler(QuizGenError, _handle_quizgen_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

    @app.get("/", response_class=PlainTextResponse)
    def read_root() -> str:
        """Healthcheck endpoint for the service."""
        return "ok"

    @app.get("/healthz", response_class=PlainTextResponse)
    def healthcheck() -> str:
        """Liveness probe used by container orchestrators."""
        return "ok"

    LOGGER.info(
        "Quiz generator ready (provider=%s, default_model=%s, max_chunks=%s)",
        config.llm_provider,
        config.default_model,
        config.max_chunks,
    )
    return app


app = create_app()
