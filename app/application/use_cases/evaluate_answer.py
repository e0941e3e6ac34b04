from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.application.ports.grading import GradingPort
from app.application.prompts.grading_prompt import SYSTEM_PROMPT, build_grading_prompt
from app.application.utils.response_parser import parse_grading_response
from app.application.utils.scoring import normalize_score
from app.domain.entities.answer import AnswerItem
from app.domain.entities.evaluation import EvaluationFields, EvaluationRecord

logger = logging.getLogger(__name__)

EMPTY_STRENGTHS = "No se proporcionó respuesta."
EMPTY_IMPROVEMENTS = (
    "Debes responder la pregunta. Estudia la respuesta modelo para comprender "
    "los conceptos clave que debes incluir."
)
ERROR_FIELDS = EvaluationFields(
    score=0.0,
    strengths="Error al evaluar.",
    improvements="Error técnico.",
    feedback="Hubo un error al evaluar esta respuesta.",
)


def empty_answer_fields(item: AnswerItem) -> EvaluationFields:
    return EvaluationFields(
        score=0.0,
        strengths=EMPTY_STRENGTHS,
        improvements=EMPTY_IMPROVEMENTS,
        feedback=f"No respondiste esta pregunta.\n\n📚 Respuesta modelo:\n\"{item.reference_answer}\"",
    )


@dataclass
class EvaluateAnswerUseCase:
    """
    Grades a single answer. Never raises for grading problems: transport,
    parse and unexpected errors all degrade to ERROR_FIELDS for that item.
    Blank answers are scored 0 without calling the grader.
    """

    grader: GradingPort
    system_prompt: str = field(default=SYSTEM_PROMPT)

    def needs_grading(self, item: AnswerItem) -> bool:
        return not item.is_blank

    async def execute(self, item: AnswerItem, reference_material: str | None = None) -> EvaluationRecord:
        if item.is_blank:
            logger.debug("Blank answer, skipping grader", extra={"question_id": item.question_id})
            return EvaluationRecord.from_fields(item, empty_answer_fields(item))

        try:
            prompt = build_grading_prompt(
                question=item.question_text,
                student_answer=item.student_answer,
                reference_answer=item.reference_answer,
                reference_material=reference_material,
            )
            raw = await self.grader.grade(self.system_prompt, prompt)
            parsed = parse_grading_response(raw)
            fields = EvaluationFields(
                score=normalize_score(parsed.score),
                strengths=parsed.strengths,
                improvements=parsed.improvements,
                feedback=parsed.feedback,
            )
        except Exception as e:
            logger.warning(
                "Grading failed, using fallback record",
                exc_info=True,
                extra={"question_id": item.question_id, "reason": type(e).__name__},
            )
            fields = ERROR_FIELDS

        return EvaluationRecord.from_fields(item, fields)
