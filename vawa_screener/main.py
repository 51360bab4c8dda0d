# vawa_screener/main.py
import logging
import os
from typing import List

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel

from vawa_screener.eligibility_engine import evaluate_eligibility
from vawa_screener.intake_gaps import evaluate_intake_gaps
from vawa_screener.logging_config import configure_logging
from vawa_screener.models import EligibilityResult, VawaAnswers
from vawa_screener.report import SUPPORTED_LANGUAGES, render_eligibility_pdf, report_filename
from vawa_screener.scenarios import ScenarioResult, run_self_test

load_dotenv()
configure_logging(os.getenv("VAWA_LOG_LEVEL", "INFO"))

logger = logging.getLogger(__name__)

app = FastAPI(title="VAWA I-360 Eligibility Screener")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("VAWA_CORS_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class IntakeGapsResponse(BaseModel):
    gaps: List[str]
    is_ready: bool


class SelfTestResponse(BaseModel):
    passed: int
    total: int
    results: List[ScenarioResult]


def _require_complete(answers: VawaAnswers):
    gaps = evaluate_intake_gaps(answers)
    if gaps:
        logger.info("Rejected incomplete intake: %s", gaps)
        raise HTTPException(status_code=422, detail={"message": "Intake incomplete", "gaps": gaps})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/vawa/gaps", response_model=IntakeGapsResponse)
def intake_gaps(answers: VawaAnswers):
    gaps = evaluate_intake_gaps(answers)
    return IntakeGapsResponse(gaps=gaps, is_ready=not gaps)


@app.post("/api/vawa/evaluate", response_model=EligibilityResult)
def evaluate(answers: VawaAnswers, require_complete: bool = Query(False)):
    if require_complete:
        _require_complete(answers)
    result = evaluate_eligibility(answers)
    logger.info(
        "Screened %s petition: %s (%d criteria)",
        answers.petitioner_type.value if answers.petitioner_type else "unset",
        result.overall.value,
        len(result.criteria),
    )
    return result


@app.post("/api/vawa/report")
def report(answers: VawaAnswers, lang: str = Query("en")):
    if lang not in SUPPORTED_LANGUAGES:
        raise HTTPException(status_code=400, detail=f"Unsupported language: {lang}")
    _require_complete(answers)

    result = evaluate_eligibility(answers)
    pdf_bytes = render_eligibility_pdf(
        answers, result, lang=lang, font_path=os.getenv("VAWA_REPORT_FONT") or None
    )
    filename = report_filename(answers)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/api/vawa/self-test", response_model=SelfTestResponse)
def self_test():
    results = run_self_test()
    return SelfTestResponse(
        passed=sum(1 for r in results if r.passed),
        total=len(results),
        results=results,
    )


def serve():
    uvicorn.run(
        app,
        host=os.getenv("VAWA_HOST", "127.0.0.1"),
        port=int(os.getenv("VAWA_PORT", "8000")),
        log_level=os.getenv("VAWA_LOG_LEVEL", "INFO").lower(),
    )


if __name__ == "__main__":
    serve()
