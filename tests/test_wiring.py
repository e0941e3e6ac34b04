"""
Tests for provider selection and pacing configuration.
"""

from __future__ import annotations

import pytest

from app.core.config import Settings
from app.infrastructure.llm.gemini_client import GeminiGradingClient
from app.infrastructure.llm.mock_grader import MockGrader
from app.infrastructure.llm.openai_grader import OpenAIGradingClient
from app.infrastructure.pacing.policies import FixedDelayPacing, NoPacing
from app.wiring.dependencies import build_gemini_config, build_grader, build_pacing


def _settings(**overrides) -> Settings:
    values = {"GEMINI_API_KEY": None, "OPENAI_API_KEY": None, "ENV": "dev"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_gemini_config_is_built_from_settings():
    """Generation parameters and timeout flow from settings into the injected config."""
    cfg = build_gemini_config(_settings(GEMINI_API_KEY=" key ", GRADING_TIMEOUT_SECONDS=12.5))

    assert cfg.api_key == "key"
    assert cfg.model == "gemini-3-flash-preview"
    assert (cfg.temperature, cfg.top_k, cfg.top_p, cfg.max_output_tokens) == (0.2, 40, 0.95, 2048)
    assert cfg.timeout_seconds == 12.5
    assert cfg.endpoint.endswith("/models/gemini-3-flash-preview:generateContent")


def test_gemini_selected_when_key_present():
    """The default provider with a key is the Gemini client."""
    assert isinstance(build_grader(_settings(GEMINI_API_KEY="key")), GeminiGradingClient)


def test_openai_selected_when_requested():
    """GRADING_PROVIDER=openai with a key uses the OpenAI client."""
    grader = build_grader(_settings(GRADING_PROVIDER="openai", OPENAI_API_KEY="sk-test"))

    assert isinstance(grader, OpenAIGradingClient)


@pytest.mark.parametrize(
    "overrides",
    [
        {"GRADING_PROVIDER": "mock", "ENV": "prod", "GEMINI_API_KEY": "key"},
        {"GRADING_PROVIDER": "gemini", "ENV": "dev"},
        {"GRADING_PROVIDER": "openai", "ENV": "local"},
    ],
)
def test_mock_grader_fallback(overrides):
    """Explicit mock, or a missing key in dev/local, uses the offline grader."""
    assert isinstance(build_grader(_settings(**overrides)), MockGrader)


def test_missing_key_outside_dev_is_an_error():
    """Production without a key fails loudly."""
    with pytest.raises(ValueError):
        build_grader(_settings(ENV="prod", GEMINI_API_KEY="   "))


def test_pacing_from_settings():
    """Positive pacing uses a fixed delay in seconds; zero disables it."""
    pacing = build_pacing(_settings(GRADING_PACING_MS=250))

    assert isinstance(pacing, FixedDelayPacing)
    assert pacing.delay_seconds == 0.25
    assert isinstance(build_pacing(_settings(GRADING_PACING_MS=0)), NoPacing)
