"""
Tests for single-answer grading: short-circuit, clamping and fallback records.
"""

from __future__ import annotations

import asyncio
import json

import pytest

from app.application.exceptions import ParseError, TransportError
from app.application.ports.grading import GradingPort
from app.application.prompts.grading_prompt import SYSTEM_PROMPT
from app.application.use_cases.evaluate_answer import (
    EMPTY_STRENGTHS,
    ERROR_FIELDS,
    EvaluateAnswerUseCase,
)
from app.domain.entities.answer import AnswerItem
from app.infrastructure.llm.mock_grader import MockGrader


class ScriptedGrader(GradingPort):
    """Returns (or raises) the next scripted outcome and records every prompt."""

    def __init__(self, *outcomes: object) -> None:
        self._outcomes = list(outcomes)
        self.calls: list[tuple[str, str]] = []

    async def grade(self, system_prompt: str, task_prompt: str) -> str:
        self.calls.append((system_prompt, task_prompt))
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def _item(answer: str = "La competencia objetiva atiende a la materia y la cuantía.") -> AnswerItem:
    return AnswerItem(
        question_id=7,
        question_text="¿Qué es la competencia objetiva?",
        student_answer=answer,
        reference_answer="Criterio de atribución por materia y cuantía.",
    )


def _run(uc: EvaluateAnswerUseCase, item: AnswerItem, material: str | None = None):
    return asyncio.run(uc.execute(item, material))


@pytest.mark.parametrize("answer", ["", "   ", "\n\t"])
def test_blank_answer_skips_grader(answer):
    """Blank answers score 0 without any call to the grading service."""
    grader = ScriptedGrader()
    record = _run(EvaluateAnswerUseCase(grader=grader), _item(answer))

    assert grader.calls == []
    assert record.score == 0.0
    assert record.strengths == EMPTY_STRENGTHS
    assert "Debes responder la pregunta" in record.improvements
    assert "Criterio de atribución por materia y cuantía." in record.feedback
    assert record.question_id == 7


def test_graded_record_copies_item_and_fields():
    """A normal grade keeps the item data and the parsed feedback."""
    grader = ScriptedGrader(
        '```json\n{"score": 8.5, "strengths": "S", "improvements": "I", "feedback": "F"}\n```'
    )

    record = _run(EvaluateAnswerUseCase(grader=grader), _item())

    assert record.score == 8.5
    assert (record.strengths, record.improvements, record.feedback) == ("S", "I", "F")
    assert record.question_text == "¿Qué es la competencia objetiva?"
    assert record.reference_answer == "Criterio de atribución por materia y cuantía."


def test_prompt_embeds_question_answers_and_rubric():
    """The task prompt carries question, both answers and the weighted rubric."""
    grader = ScriptedGrader('{"score": 5}')
    _run(EvaluateAnswerUseCase(grader=grader), _item())

    system_prompt, task_prompt = grader.calls[0]
    assert system_prompt == SYSTEM_PROMPT
    assert "¿Qué es la competencia objetiva?" in task_prompt
    assert "La competencia objetiva atiende a la materia y la cuantía." in task_prompt
    assert "Criterio de atribución por materia y cuantía." in task_prompt
    for weight in ("(40%)", "(30%)", "(20%)", "(10%)"):
        assert weight in task_prompt
    assert "CONTENIDO DE REFERENCIA" not in task_prompt


def test_reference_material_is_embedded_when_given():
    """Optional reference material appears ahead of the question."""
    grader = ScriptedGrader('{"score": 5}')
    _run(EvaluateAnswerUseCase(grader=grader), _item(), material="Art. 45 LEC")

    task_prompt = grader.calls[0][1]
    assert "CONTENIDO DE REFERENCIA:\nArt. 45 LEC" in task_prompt
    assert task_prompt.index("Art. 45 LEC") < task_prompt.index("PREGUNTA DEL EXAMEN")


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"score": 15}, 10.0),
        ({"score": -2}, 0.0),
        ({"score": "muy bien"}, 0.0),
        ({}, 0.0),
        ({"score": None}, 0.0),
        ({"score": float("nan")}, 0.0),
        ({"score": "9.97"}, 10.0),
        ({"score": "1e3"}, 10.0),
        ({"score": "2.5e1"}, 10.0),
        ({"score": "Infinity"}, 10.0),
        ({"score": "-Infinity"}, 0.0),
        ({"score": 10**400}, 10.0),
        ({"score": 6.04}, 6.0),
    ],
)
def test_score_is_always_within_bounds(payload, expected):
    """Out-of-range, non-numeric, NaN and missing scores are normalised into [0, 10]."""
    grader = ScriptedGrader(json.dumps(payload))

    record = _run(EvaluateAnswerUseCase(grader=grader), _item())

    assert 0.0 <= record.score <= 10.0
    assert record.score == expected


@pytest.mark.parametrize(
    "failure",
    [
        TransportError("Gemini API error: 503 - unavailable", status_code=503, body="unavailable"),
        ParseError("bad output"),
        RuntimeError("unexpected"),
    ],
)
def test_failures_become_fallback_record(failure):
    """Any grading failure yields the neutral error record instead of raising."""
    grader = ScriptedGrader(failure)

    record = _run(EvaluateAnswerUseCase(grader=grader), _item())

    assert record.score == ERROR_FIELDS.score
    assert record.feedback == "Hubo un error al evaluar esta respuesta."
    assert record.question_id == 7


def test_unparseable_output_becomes_fallback_record():
    """Prose without JSON degrades to the error record."""
    grader = ScriptedGrader("No puedo evaluar esto.")

    record = _run(EvaluateAnswerUseCase(grader=grader), _item())

    assert record.score == 0.0
    assert record.strengths == "Error al evaluar."


def test_cancellation_is_not_swallowed():
    """CancelledError propagates instead of turning into a fallback record."""
    grader = ScriptedGrader(asyncio.CancelledError())

    with pytest.raises(asyncio.CancelledError):
        _run(EvaluateAnswerUseCase(grader=grader), _item())


def test_mock_grader_round_trip():
    """The offline grader produces output the real parser accepts."""
    grader = MockGrader()
    item = _item("Criterio de atribución por materia.")

    record = _run(EvaluateAnswerUseCase(grader=grader), item)

    assert grader.calls == 1
    assert 0.0 < record.score <= 10.0
    assert record.feedback == "Mock feedback generado sin conexión."
