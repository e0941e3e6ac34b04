from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnswerItemSchema(CamelModel):
    question_id: int
    question_text: str = ""
    student_answer: str = ""
    reference_answer: str = ""


class EvaluateExamRequestSchema(CamelModel):
    items: list[AnswerItemSchema] = Field(default_factory=list)
    reference_material: str | None = None


class EvaluationRecordSchema(CamelModel):
    question_id: int
    question_text: str
    student_answer: str
    reference_answer: str
    score: float = Field(ge=0, le=10)
    strengths: str
    improvements: str
    feedback: str


class EvaluationReportSchema(CamelModel):
    evaluations: list[EvaluationRecordSchema]
    average_score: float
    total_score: float
    cancelled: bool = False


class GradingCompleteRequestSchema(CamelModel):
    prompt: str | None = None
    system_prompt: str | None = None


class GradingCompleteResponseSchema(BaseModel):
    text: str
