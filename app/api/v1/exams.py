import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.v1.schemas import (
    EvaluateExamRequestSchema,
    EvaluationRecordSchema,
    EvaluationReportSchema,
)
from app.application.use_cases.evaluate_exam import EvaluateExamUseCase
from app.domain.entities.answer import AnswerItem
from app.wiring.dependencies import get_evaluate_exam_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def provide_exam_use_case() -> EvaluateExamUseCase:
    try:
        return get_evaluate_exam_use_case()
    except ValueError as e:
        logger.error("Grading provider not configured", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/evaluate", response_model=EvaluationReportSchema)
async def evaluate_exam(
    req: EvaluateExamRequestSchema,
    request: Request,
    uc: EvaluateExamUseCase = Depends(provide_exam_use_case),
):
    items = [
        AnswerItem.from_payload(
            question_id=i.question_id,
            question_text=i.question_text,
            student_answer=i.student_answer,
            reference_answer=i.reference_answer,
        )
        for i in req.items
    ]
    report = await uc.execute(
        items,
        reference_material=req.reference_material,
        is_cancelled=request.is_disconnected,
    )

    return EvaluationReportSchema(
        evaluations=[EvaluationRecordSchema(**asdict(r)) for r in report.evaluations],
        average_score=report.average_score,
        total_score=report.total_score,
        cancelled=report.cancelled,
    )
