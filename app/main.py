import logging

from fastapi import FastAPI

from app.api.v1.exams import router as exams_router
from app.api.v1.grading import router as grading_router
from app.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("question_id", "score", "status", "provider", "count", "reason", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Exam Practice Grader", version="1.0.0")

app.include_router(exams_router, prefix="/api/v1/exams", tags=["exams"])
app.include_router(grading_router, prefix="/api/v1/grading", tags=["grading"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
