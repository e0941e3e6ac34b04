from functools import lru_cache
import logging

from app.core.config import Settings, settings
from app.application.ports.grading import GradingPort
from app.application.ports.pacing import PacingPolicy
from app.application.use_cases.evaluate_answer import EvaluateAnswerUseCase
from app.application.use_cases.evaluate_exam import EvaluateExamUseCase
from app.infrastructure.llm.gemini_client import GeminiConfig, GeminiGradingClient
from app.infrastructure.llm.mock_grader import MockGrader
from app.infrastructure.llm.openai_grader import OpenAIGradingClient
from app.infrastructure.pacing.policies import FixedDelayPacing, NoPacing


logger = logging.getLogger(__name__)


def build_gemini_config(cfg: Settings) -> GeminiConfig:
    return GeminiConfig(
        api_key=(cfg.GEMINI_API_KEY or "").strip(),
        model=cfg.GEMINI_MODEL,
        base_url=cfg.GEMINI_BASE_URL,
        temperature=cfg.GEMINI_TEMPERATURE,
        top_k=cfg.GEMINI_TOP_K,
        top_p=cfg.GEMINI_TOP_P,
        max_output_tokens=cfg.GEMINI_MAX_OUTPUT_TOKENS,
        timeout_seconds=cfg.GRADING_TIMEOUT_SECONDS,
    )


def build_grader(cfg: Settings) -> GradingPort:
    provider = cfg.GRADING_PROVIDER.strip().lower()

    if provider == "gemini" and cfg.GEMINI_API_KEY and cfg.GEMINI_API_KEY.strip():
        logger.info("Using Gemini grader", extra={"provider": provider})
        return GeminiGradingClient(build_gemini_config(cfg))

    if provider == "openai" and cfg.OPENAI_API_KEY and cfg.OPENAI_API_KEY.strip():
        logger.info("Using OpenAI grader", extra={"provider": provider})
        return OpenAIGradingClient(
            api_key=cfg.OPENAI_API_KEY.strip(),
            model=cfg.OPENAI_MODEL_GRADE,
            temperature=cfg.OPENAI_TEMPERATURE_GRADE,
            timeout_seconds=cfg.GRADING_TIMEOUT_SECONDS,
        )

    if provider == "mock" or cfg.ENV.lower() in {"dev", "local"}:
        logger.info("Using MockGrader", extra={"provider": provider, "reason": "mock or missing key in dev"})
        return MockGrader()

    raise ValueError(f"No API key configured for grading provider '{cfg.GRADING_PROVIDER}'.")


def build_pacing(cfg: Settings) -> PacingPolicy:
    if cfg.GRADING_PACING_MS <= 0:
        return NoPacing()
    return FixedDelayPacing(delay_seconds=cfg.GRADING_PACING_MS / 1000)


@lru_cache
def get_grader() -> GradingPort:
    return build_grader(settings)


def get_evaluate_answer_use_case() -> EvaluateAnswerUseCase:
    return EvaluateAnswerUseCase(grader=get_grader())


def get_evaluate_exam_use_case() -> EvaluateExamUseCase:
    return EvaluateExamUseCase(
        evaluate_answer=get_evaluate_answer_use_case(),
        pacing=build_pacing(settings),
    )
