"""
Public v1 search response schema.

Optional fields default to ``None`` and are dropped on encoding, so a field is
either present with a value (possibly empty) or absent from the JSON.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class Contact(BaseModel):
    name: str = ""
    telephone: Optional[str] = None
    email: str = ""


class ContentType(BaseModel):
    type: str
    count: int


class MatchDetails(BaseModel):
    value: Optional[str] = None
    start: int
    end: int


class MatchDescription(BaseModel):
    summary: Optional[List[MatchDetails]] = None
    title: Optional[List[MatchDetails]] = None
    edition: Optional[List[MatchDetails]] = None
    meta_description: Optional[List[MatchDetails]] = None
    keywords: Optional[List[MatchDetails]] = None
    dataset_id: Optional[List[MatchDetails]] = None


class Matches(BaseModel):
    description: MatchDescription = Field(default_factory=MatchDescription)


class Description(BaseModel):
    contact: Optional[Contact] = None
    dataset_id: Optional[str] = None
    edition: Optional[str] = None
    headline1: Optional[str] = None
    headline2: Optional[str] = None
    headline3: Optional[str] = None
    keywords: Optional[List[str]] = None
    latest_release: Optional[bool] = None
    language: Optional[str] = None
    meta_description: Optional[str] = None
    national_statistic: Optional[bool] = None
    next_release: Optional[str] = None
    pre_unit: Optional[str] = None
    release_date: Optional[str] = None
    source: Optional[str] = None
    summary: str = ""
    title: str = ""
    unit: Optional[str] = None


class ContentItem(BaseModel):
    description: Description
    type: str = ""
    uri: str = ""
    matches: Optional[Matches] = None


class SearchResponse(BaseModel):
    count: int = 0
    took: int = 0
    content_types: List[ContentType] = Field(default_factory=list)
    items: List[ContentItem] = Field(default_factory=list)
    suggestions: Optional[List[str]] = None
    additional_suggestions: Optional[List[str]] = None
