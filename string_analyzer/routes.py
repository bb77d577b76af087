from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response

from string_analyzer.schemas import FilterResponse, NaturalLanguageFilterResponse, StringRecord
from string_analyzer.services import (
    create_string,
    delete_string_by_value,
    get_all_strings_with_filters,
    get_string_by_value,
    get_strings_by_natural_language,
    validate_query_filters,
)
from string_analyzer.store import StringStore

router = APIRouter()


def get_store(request: Request) -> StringStore:
    """Each app instance owns its store; see main.create_app."""
    return request.app.state.store


@router.get("/")
def root() -> dict:
    return {
        "message": "String Analyzer API is running",
        "endpoints": {
            "POST /strings": "Create/analyze a string",
            "GET /strings/{string_value}": "Get specific string",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Natural language filtering",
            "DELETE /strings/{string_value}": "Delete a string",
        },
    }


@router.get("/health")
def health() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok"}


@router.post("/strings", response_model=StringRecord, status_code=201)
def create_string_endpoint(
    payload: Dict[str, Any] = Body(..., examples=[{"value": "racecar"}]),
    store: StringStore = Depends(get_store),
) -> StringRecord:
    """Create and analyze a string."""
    return create_string(payload.get("value"), store)


# Registered before /strings/{string_value} so the literal path wins
@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageFilterResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="e.g. 'all single word palindromic strings'"),
    store: StringStore = Depends(get_store),
) -> dict:
    """Filter strings using a natural language query."""
    return get_strings_by_natural_language(store, query)


@router.get("/strings/{string_value:path}", response_model=StringRecord)
def get_string_endpoint(string_value: str, store: StringStore = Depends(get_store)) -> StringRecord:
    """Get a specific string by its raw value."""
    return get_string_by_value(string_value, store)


@router.get("/strings", response_model=FilterResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="'true' or 'false'"),
    min_length: Optional[str] = Query(None),
    max_length: Optional[str] = Query(None),
    word_count: Optional[str] = Query(None),
    contains_character: Optional[str] = Query(None),
    store: StringStore = Depends(get_store),
) -> dict:
    """Get all strings with optional filtering."""
    criteria = validate_query_filters(is_palindrome, min_length, max_length, word_count, contains_character)
    return get_all_strings_with_filters(store, criteria)


@router.delete("/strings/{string_value:path}", status_code=204, response_class=Response)
def delete_string_endpoint(string_value: str, store: StringStore = Depends(get_store)) -> Response:
    """Delete a string by its raw value."""
    delete_string_by_value(string_value, store)
    return Response(status_code=204)
