from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .db import init_db
from .orchestrator import compile_search
from .schemas import ErrorResponse, SearchRequest, SearchResponse, VocabularyResponse
from .validation import SearchValidationError
from .vocabulary import VOLUNTEER_TYPES, WORK_MODES, causes_listing, skill_taxonomy


settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(RequestValidationError)
async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Body was not a JSON object; keep the search envelope instead of FastAPI's 422
    return _error(400, "Request body must be a JSON object with a 'query' field")


@app.on_event("startup")
def _startup() -> None:  # create tables
    init_db()


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def post_search(payload: SearchRequest) -> JSONResponse:
    try:
        result = await compile_search(payload.query)
        body = SearchResponse(data=result.filters.to_payload(), method=result.method)
        return JSONResponse(content=body.model_dump())
    except SearchValidationError as exc:
        return _error(400, str(exc))
    except Exception:  # noqa: BLE001
        logger.exception("Search failed")
        return _error(500, "Search failed")


@app.get("/vocabulary", response_model=VocabularyResponse)
async def get_vocabulary() -> VocabularyResponse:
    return VocabularyResponse(
        skill_categories=skill_taxonomy(),
        causes=causes_listing(),
        work_modes=list(WORK_MODES),
        volunteer_types=list(VOLUNTEER_TYPES),
    )
