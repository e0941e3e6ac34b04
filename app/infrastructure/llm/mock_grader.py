from __future__ import annotations

import json
import re

from app.application.ports.grading import GradingPort

_WORD = re.compile(r"\w{4,}", re.UNICODE)
_SECTION = re.compile(
    r"RESPUESTA DEL ESTUDIANTE:\n(?P<student>.*?)\n\nRESPUESTA MODELO \(CORRECTA\):\n(?P<reference>.*?)\n\n",
    re.DOTALL,
)


class MockGrader(GradingPort):
    """Offline grader: scores by word overlap between student and model answers."""

    def __init__(self) -> None:
        self.calls = 0

    async def grade(self, system_prompt: str, task_prompt: str) -> str:
        self.calls += 1
        match = _SECTION.search(task_prompt)
        if not match:
            return json.dumps({"score": 0, "feedback": "Mock: prompt sin secciones reconocibles."})

        student = {w.lower() for w in _WORD.findall(match.group("student"))}
        reference = {w.lower() for w in _WORD.findall(match.group("reference"))}
        overlap = len(student & reference) / max(1, len(reference))
        score = round(10 * overlap, 1)

        return "```json\n" + json.dumps(
            {
                "score": score,
                "strengths": f"Mock: {len(student & reference)} conceptos coinciden con la respuesta modelo.",
                "improvements": f"Mock: faltan {len(reference - student)} conceptos de la respuesta modelo.",
                "feedback": "Mock feedback generado sin conexión.",
            },
            ensure_ascii=False,
        ) + "\n```"
