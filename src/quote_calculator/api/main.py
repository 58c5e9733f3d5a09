"""
Quote Calculator API - FastAPI surface over the engine, exporter and webhook.
"""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from quote_calculator import __version__
from quote_calculator.config.settings import get_settings, setup_logging
from quote_calculator.engine import (
    ClientEntry, QuoteRequest, calculate, ValidationError, UnknownTier, SubmissionError,
)
from quote_calculator.engine.tiers import all_tiers
from quote_calculator.export.csv_export import to_csv, export_filename
from quote_calculator.services.webhook import submit_quote

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Quote Calculator API",
    description="Tiered bookkeeping pricing quotes",
    version=__version__,
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ClientIn(BaseModel):
    name: str = ""
    tier: str = "gold"
    transactions: int = 0
    statements: int = 0


class QuoteIn(BaseModel):
    company_name: str = ""
    company_email: str = ""
    clients: list[ClientIn] = []

    def to_request(self) -> QuoteRequest:
        return QuoteRequest(
            company_name=self.company_name,
            company_email=self.company_email,
            clients=[ClientEntry(**c.model_dump()) for c in self.clients],
        )


@app.exception_handler(ValidationError)
async def validation_error_handler(request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


def _calculate(quote: QuoteIn):
    settings = get_settings()
    if len(quote.clients) > settings.max_clients:
        raise HTTPException(
            status_code=422,
            detail=f"At most {settings.max_clients} clients per quote",
        )
    try:
        return calculate(quote.to_request())
    except UnknownTier as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/")
async def root():
    return {"status": "online", "message": "Quote Calculator API Active"}


@app.get("/tiers")
async def get_tiers():
    return [
        {
            "id": spec.id,
            "name": spec.name,
            "transaction_rate": spec.transaction_rate,
            "statement_rate": spec.statement_rate,
            "discount": spec.discount,
        }
        for spec in all_tiers()
    ]


@app.post("/calculate")
async def calculate_quote(quote: QuoteIn):
    return _calculate(quote).to_dict()


@app.post("/export/csv")
async def export_csv(quote: QuoteIn):
    result = _calculate(quote)
    return Response(
        content=to_csv(result),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(result.company_name)}"'},
    )


@app.post("/submit")
def submit(quote: QuoteIn):
    result = _calculate(quote)
    try:
        ack = submit_quote(result)
    except SubmissionError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"success": True, "status_code": ack.status_code, "quote": result.to_dict()}
