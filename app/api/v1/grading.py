import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import GradingCompleteRequestSchema, GradingCompleteResponseSchema
from app.application.exceptions import TransportError
from app.application.ports.grading import GradingPort
from app.wiring.dependencies import get_grader

router = APIRouter()
logger = logging.getLogger(__name__)


def provide_grader() -> GradingPort:
    try:
        return get_grader()
    except ValueError as e:
        logger.error("Grading provider not configured", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/complete", response_model=GradingCompleteResponseSchema)
async def complete(
    req: GradingCompleteRequestSchema,
    grader: GradingPort = Depends(provide_grader),
):
    if not (req.prompt or "").strip() or not (req.system_prompt or "").strip():
        raise HTTPException(status_code=400, detail="prompt and systemPrompt are required")

    try:
        text = await grader.grade(req.system_prompt, req.prompt)
    except TransportError as e:
        status = e.status_code if e.status_code and e.status_code >= 400 else 502
        raise HTTPException(status_code=status, detail=e.body or str(e))

    return GradingCompleteResponseSchema(text=text)
