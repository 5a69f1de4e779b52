"""Place-name normalization routes.

POST /places/normalize — flatten a place name into one lookup key
POST /places/tokenize  — split a place name into levels of tokens
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from placenorm.normalization.place_normalizer import Normalizer, get_normalizer

router = APIRouter(prefix="/places", tags=["places"])


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class NormalizeBody(BaseModel):
    text: str
    allow_wildcards: bool = False


class TokenizeBody(BaseModel):
    text: str


class NormalizeResponse(BaseModel):
    text: str
    normalized: str


class TokenizeResponse(BaseModel):
    text: str
    levels: list[list[str]]


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/normalize", response_model=NormalizeResponse, summary="Normalize a place name")
def normalize_place(
    body: NormalizeBody,
    normalizer: Normalizer = Depends(get_normalizer),
) -> NormalizeResponse:
    return NormalizeResponse(
        text=body.text,
        normalized=normalizer.normalize(body.text, body.allow_wildcards),
    )


@router.post("/tokenize", response_model=TokenizeResponse, summary="Tokenize a place name")
def tokenize_place(
    body: TokenizeBody,
    normalizer: Normalizer = Depends(get_normalizer),
) -> TokenizeResponse:
    return TokenizeResponse(text=body.text, levels=normalizer.tokenize(body.text))
