from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from app.application.ports.pacing import PacingPolicy
from app.application.use_cases.aggregate_report import aggregate
from app.application.use_cases.evaluate_answer import EvaluateAnswerUseCase
from app.domain.entities.answer import AnswerItem
from app.domain.entities.evaluation import EvaluationRecord, EvaluationReport

CancelCheck = Callable[[], Awaitable[bool]]

logger = logging.getLogger(__name__)


@dataclass
class EvaluateExamUseCase:
    """
    Grades an exam strictly one answer at a time, in input order.

    The pacing policy is consulted before every real grading call; blank
    answers make no call and are not paced. `is_cancelled`, when given, is
    checked between items and stops the loop early with a partial report.
    """

    evaluate_answer: EvaluateAnswerUseCase
    pacing: PacingPolicy

    async def execute(
        self,
        items: Sequence[AnswerItem],
        reference_material: str | None = None,
        is_cancelled: CancelCheck | None = None,
    ) -> EvaluationReport:
        logger.info("Exam evaluation started", extra={"count": len(items)})

        evaluations: list[EvaluationRecord] = []
        calls_made = 0
        cancelled = False

        for index, item in enumerate(items):
            if index > 0 and is_cancelled is not None and await is_cancelled():
                cancelled = True
                logger.info("Exam evaluation cancelled", extra={"count": len(evaluations)})
                break

            if self.evaluate_answer.needs_grading(item):
                await self.pacing.wait(calls_made)
                calls_made += 1

            evaluations.append(await self.evaluate_answer.execute(item, reference_material))

        summary = aggregate(evaluations)
        logger.info(
            "Exam evaluation finished",
            extra={"count": len(evaluations), "score": summary.average_score},
        )
        return EvaluationReport(
            evaluations=tuple(evaluations),
            average_score=summary.average_score,
            total_score=summary.total_score,
            cancelled=cancelled,
        )
