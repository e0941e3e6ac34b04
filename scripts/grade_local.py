#!/usr/bin/env python3
"""
Local grading harness (no HTTP).

Usage:
  python3 scripts/grade_local.py
  python3 scripts/grade_local.py exam.json

What it does:
- Loads answer items from a JSON file (list of {questionId, questionText,
  studentAnswer, referenceAnswer}) or uses a built-in two-question sample
- Runs them through the same EvaluateExamUseCase the API uses
- Prints each score with its feedback and the aggregate scores
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.domain.entities.answer import AnswerItem
from app.wiring.dependencies import get_evaluate_exam_use_case


SAMPLE = [
    {
        "questionId": 1,
        "questionText": "¿Qué es la competencia objetiva en el proceso civil?",
        "studentAnswer": "Es el criterio que atribuye el conocimiento de un asunto a un tipo de tribunal "
        "según la materia o la cuantía.",
        "referenceAnswer": "La competencia objetiva determina qué tipo de órgano jurisdiccional conoce "
        "en primera instancia de un asunto, atendiendo a la materia y a la cuantía.",
    },
    {
        "questionId": 2,
        "questionText": "Enumere los requisitos de la demanda en el juicio verbal.",
        "studentAnswer": "",
        "referenceAnswer": "Identificación de las partes, domicilios, petición concreta y documentos.",
    },
]


def _load_items(path: str | None) -> list[AnswerItem]:
    raw = json.loads(Path(path).read_text(encoding="utf-8")) if path else SAMPLE
    return [
        AnswerItem.from_payload(
            question_id=r["questionId"],
            question_text=r.get("questionText"),
            student_answer=r.get("studentAnswer"),
            reference_answer=r.get("referenceAnswer"),
        )
        for r in raw
    ]


def _print_report(report) -> None:
    print("\nExam report")
    print("-" * 60)
    for r in report.evaluations:
        print(f"Q{r.question_id}: {r.score:.1f}/10")
        print(f"  + {r.strengths}")
        print(f"  - {r.improvements}")
        print(f"  > {r.feedback}")
    print("-" * 60)
    print(f"total: {report.total_score:.1f}  average: {report.average_score:.2f}")


def main() -> None:
    items = _load_items(sys.argv[1] if len(sys.argv) > 1 else None)
    uc = get_evaluate_exam_use_case()
    report = asyncio.run(uc.execute(items))
    _print_report(report)


if __name__ == "__main__":
    main()
