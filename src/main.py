"""Pali lookup FastAPI application - dictionary lookup for Pali and Classical Chinese."""

from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from logging_config import configure_logging
from models import (
    ChineseLookupResponse,
    DictionariesResponse,
    LookupRequest,
    PaliLookupResponse,
)
from services.dictionary_lookup import describe_dictionaries, lookup_words
from services.tables import LookupTables, TableLoadError, TableNotFoundError

logger = structlog.get_logger()


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and load the shared DPD tables on startup."""
    configure_logging()
    tables = LookupTables.get_instance()
    try:
        tables.inflections()
        tables.deconstructions()
    except TableLoadError as e:
        logger.error("lookup_table_unreadable", error=str(e))
    logger.info("service_started", data_dir=str(tables.data_dir), dictionaries=len(tables.available_pairs()))
    yield


def get_tables() -> LookupTables:
    return LookupTables.get_instance()


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Pali Lookup API",
    description="""Dictionary lookup for Pali and Classical Chinese texts.

## Features
- **Pali**: inflected forms resolved to headwords via the Digital Pali Dictionary
- **Compounds**: decomposition with sandhi repair when no headword matches
- **Chinese**: every dictionary word occurring in the text, variants normalized
- **Fallback**: English definitions when the target dictionary has no match

## Endpoints
- `/lookup` - Look up a list of words for a language pair
- `/dictionaries` - Available dictionaries
""",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": settings.APP_NAME, "version": settings.APP_VERSION}


@app.get("/health", tags=["Health"])
async def health(tables: LookupTables = Depends(get_tables)) -> dict[str, Any]:
    """Detailed health check."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "dictionaries": len(tables.available_pairs()),
    }


# ============================================================================
# Lookup Endpoints
# ============================================================================


@app.post(
    "/lookup",
    response_model=PaliLookupResponse | ChineseLookupResponse,
    response_model_exclude_none=True,
    tags=["Lookup"],
)
def lookup_endpoint(request: LookupRequest, tables: LookupTables = Depends(get_tables)) -> dict[str, Any]:
    """
    Look up words in the dictionary for a language pair.

    For Pali, returns each matched word with its resolved parts:
    dictionary entries (`base`, `entry`) and glosses (`base`, `meaning`).
    Unmatched words are omitted.

    For Chinese, returns every dictionary word found in the joined text.
    """
    try:
        return lookup_words(request.words, request.from_lang, request.to_lang, tables)
    except TableNotFoundError as e:
        raise HTTPException(
            status_code=404,
            detail=f"No dictionary for {request.from_lang} -> {request.to_lang}",
        ) from e
    except TableLoadError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except Exception as e:
        logger.exception("lookup_failed", pair=f"{request.from_lang}-{request.to_lang}")
        raise HTTPException(status_code=500, detail=f"Lookup failed: {e!s}") from e


@app.get("/dictionaries", response_model=DictionariesResponse, tags=["Lookup"])
async def dictionaries_endpoint(tables: LookupTables = Depends(get_tables)) -> DictionariesResponse:
    """List available dictionaries and DPD table status."""
    return DictionariesResponse(**describe_dictionaries(tables))


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
