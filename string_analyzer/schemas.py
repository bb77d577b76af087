from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Dict, Any, Optional, List



class StringProperties(BaseModel):
    """Computed properties of an analyzed string."""
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    """A stored string together with its computed properties."""
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class FilterCriteria(BaseModel):
    """Optional constraints used to narrow down the stored strings."""
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.as_dict()


class FilterResponse(BaseModel):
    """Response schema for GET /strings."""
    data: List[StringRecord]
    count: int
    filters_applied: Dict[str, Any]


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageFilterResponse(BaseModel):
    """Response schema for GET /strings/filter-by-natural-language."""
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery
