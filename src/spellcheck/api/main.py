# src/spellcheck/api/main.py

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from typing import List

from ..logger import get_logger
from ..spelling.errors import DictionaryUnavailableError, SearchSpaceExceededError
from ..spelling.service import SpellCheckService, build_service

logger = get_logger("api")


# ---------------------- Schemas ----------------------
class SpellCheckResponse(BaseModel):
    word: str = Field(..., description="Word as received")
    correct: bool
    suggestions: List[str] = Field(default_factory=list, description="Dictionary words, sorted")


# ---------------------- Factory ----------------------
def create_app(service: SpellCheckService = None) -> FastAPI:
    """
    Factory to create FastAPI app.
    Allows injecting a custom spell check service for testing.
    """
    app = FastAPI(title='Spell Check API')

    # CORS middleware for frontend access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Dictionary itself loads lazily on the first request
    if service is None:
        service = build_service()

    # ---------- Errors ----------
    @app.exception_handler(DictionaryUnavailableError)
    async def dictionary_unavailable(request: Request, exc: DictionaryUnavailableError):
        logger.warning(f"{request.url.path}: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    @app.exception_handler(SearchSpaceExceededError)
    async def search_space_exceeded(request: Request, exc: SearchSpaceExceededError):
        logger.warning(f"{request.url.path}: {exc}")
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # ---------- Health check ----------
    @app.get('/')
    def read_root():
        return {'message': 'Spell check service is running'}

    # ---------- Spelling ----------
    @app.get('/spelling/{word}', response_model=SpellCheckResponse)
    def check_spelling(word: str):
        result = service.check_spelling(word)
        return SpellCheckResponse(
            word=word,
            correct=result.correct,
            suggestions=sorted(result.suggestions),
        )

    return app

# ---------------------- Uvicorn entry ----------------------
# Expose a top-level 'app' for Uvicorn
app = create_app()
