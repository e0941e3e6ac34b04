from dataclasses import dataclass


@dataclass(frozen=True)
class AnswerItem:
    question_id: int
    question_text: str
    student_answer: str
    reference_answer: str

    @property
    def is_blank(self) -> bool:
        return not (self.student_answer or "").strip()

    @staticmethod
    def from_payload(
        question_id: int,
        question_text: str | None,
        student_answer: str | None,
        reference_answer: str | None,
    ) -> "AnswerItem":
        return AnswerItem(
            question_id=int(question_id),
            question_text=question_text or "",
            student_answer=student_answer or "",
            reference_answer=reference_answer or "",
        )
