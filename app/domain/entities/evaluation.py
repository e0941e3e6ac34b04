from dataclasses import dataclass, field

from app.domain.entities.answer import AnswerItem


@dataclass(frozen=True)
class EvaluationFields:
    """Structured grade extracted from one grading-service response."""

    score: float
    strengths: str
    improvements: str
    feedback: str


@dataclass(frozen=True)
class EvaluationRecord:
    question_id: int
    question_text: str
    student_answer: str
    reference_answer: str
    score: float
    strengths: str
    improvements: str
    feedback: str

    @staticmethod
    def from_fields(item: AnswerItem, fields: EvaluationFields) -> "EvaluationRecord":
        return EvaluationRecord(
            question_id=item.question_id,
            question_text=item.question_text,
            student_answer=item.student_answer,
            reference_answer=item.reference_answer,
            score=fields.score,
            strengths=fields.strengths,
            improvements=fields.improvements,
            feedback=fields.feedback,
        )


@dataclass(frozen=True)
class ScoreSummary:
    total_score: float
    average_score: float


@dataclass(frozen=True)
class EvaluationReport:
    evaluations: tuple[EvaluationRecord, ...] = field(default_factory=tuple)
    average_score: float = 0.0
    total_score: float = 0.0
    cancelled: bool = False
