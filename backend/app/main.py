from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.exceptions import DraftingError
import logging
import sys

settings = get_settings()

# Configure Logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

app = FastAPI(
    title="Quasi-Judicial Drafting API",
    version="1.0.0",
    description="Drafts Decisions and Orders from case records and Government Resolutions"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.ALLOWED_ORIGINS),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(DraftingError)
async def drafting_error_handler(request: Request, exc: DraftingError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())

@app.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "provider": settings.LLM_PROVIDER, "model": settings.LLM_MODEL}

# Include Routers
from app.api.routes import drafting
app.include_router(drafting.router, prefix="/api", tags=["Drafting"])
