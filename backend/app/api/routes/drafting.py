import json
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.exceptions import InvalidRequestError
from app.services.drafting.models import DraftResult, ErrorResponse
from app.services.drafting.service import DraftingHandler

router = APIRouter()

def get_drafting_handler(settings: Settings = Depends(get_settings)) -> DraftingHandler:
    return DraftingHandler(settings)

async def _read_payload(request: Request) -> dict:
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError:
        raise InvalidRequestError("Request body must be JSON")

@router.api_route(
    "/generate",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    responses={
        200: {"model": DraftResult, "description": "Draft (or LegacyDraft for text output)"},
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_draft(request: Request, handler: DraftingHandler = Depends(get_drafting_handler)):
    """
    Draft a quasi-judicial Decision or Order.

    Flow:
    1. Normalize payload into a CaseRecord (missing fields -> placeholders)
    2. Render the language/mode template into a prompt pair (Deterministic)
    3. Generate (LLM, single call)
    4. Extract facts / decisionText / orderText, or fall back to raw text

    GET returns a health probe: {"ok": true}.
    """
    payload = await _read_payload(request) if request.method == "POST" else {}
    outcome = await handler.handle(request.method, payload)
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)
