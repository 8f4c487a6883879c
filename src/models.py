"""Pydantic models for the lookup API requests and responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Request Models
# ============================================================================


class LookupRequest(BaseModel):
    """Request body for dictionary lookup."""
    model_config = ConfigDict(populate_by_name=True)

    words: list[str] = Field(..., min_length=1, max_length=1000, description="Words to look up")
    from_lang: Literal["pli", "lzh"] = Field(..., alias="from", description="Source language")
    to_lang: str = Field(..., alias="to", pattern=r"^[a-z]{2,3}$", description="Target language")


# ============================================================================
# Response Components
# ============================================================================


class DictionaryEntry(BaseModel):
    """Compact dictionary entry, as stored in the lookup tables."""
    model_config = ConfigDict(extra="allow")

    d: str | list[str] | None = Field(None, description="Definition(s)")
    g: str | None = Field(None, description="Grammar")
    x: str | list[str] | None = Field(None, description="Cross reference(s)")
    p: str | None = Field(None, description="Pronunciation (Chinese only)")


class MatchResult(BaseModel):
    """One resolved part of a Pali word."""
    base: str = Field(..., description="Headword or word part")
    entry: DictionaryEntry | None = Field(None, description="Dictionary entry")
    meaning: str | None = Field(None, description="Gloss when there is no entry ('?' if unknown)")


class DictionaryPair(BaseModel):
    """Available dictionary."""
    model_config = ConfigDict(populate_by_name=True)

    from_lang: str = Field(..., alias="from")
    to_lang: str = Field(..., alias="to")


# ============================================================================
# Response Models
# ============================================================================


PaliLookupResponse = dict[str, list[MatchResult]]
ChineseLookupResponse = dict[str, DictionaryEntry]


class DictionariesResponse(BaseModel):
    """Response for /dictionaries."""
    dictionaries: list[DictionaryPair]
    inflections: bool = Field(..., description="DPD inflection table available")
    decompositions: bool = Field(..., description="DPD deconstructor table available")
