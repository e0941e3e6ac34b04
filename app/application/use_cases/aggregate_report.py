from typing import Sequence

from app.domain.entities.evaluation import EvaluationRecord, ScoreSummary


def aggregate(records: Sequence[EvaluationRecord]) -> ScoreSummary:
    total = sum(r.score for r in records)
    average = total / len(records) if records else 0.0
    return ScoreSummary(total_score=float(total), average_score=float(average))
