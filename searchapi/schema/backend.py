"""
Schema of the raw multi-search response returned by the search backend.

Only the parts of the envelope the transformer reads are modelled; anything
else the backend sends is ignored. A JSON null reads as the field's default,
the same as a missing key.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ESModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ESContact(ESModel):
    name: str = ""
    telephone: Optional[str] = None
    email: str = ""


class ESSourceDescription(ESModel):
    summary: str = ""
    next_release: Optional[str] = Field(None, alias="nextRelease")
    unit: Optional[str] = None
    keywords: Optional[List[str]] = None
    release_date: Optional[str] = Field(None, alias="releaseDate")
    edition: Optional[str] = None
    latest_release: Optional[bool] = Field(None, alias="latestRelease")
    language: Optional[str] = None
    contact: Optional[ESContact] = None
    dataset_id: Optional[str] = Field(None, alias="datasetId")
    source: Optional[str] = None
    title: str = ""
    meta_description: Optional[str] = Field(None, alias="metaDescription")
    national_statistic: Optional[bool] = Field(None, alias="nationalStatistic")
    pre_unit: Optional[str] = Field(None, alias="preUnit")
    headline1: Optional[str] = None
    headline2: Optional[str] = None
    headline3: Optional[str] = None


class ESSourceDocument(ESModel):
    description: ESSourceDescription = Field(default_factory=ESSourceDescription)
    type: str = ""
    uri: str = ""


class ESHighlight(ESModel):
    description_title: Optional[List[str]] = Field(None, alias="description.title")
    description_edition: Optional[List[str]] = Field(None, alias="description.edition")
    description_summary: Optional[List[str]] = Field(None, alias="description.summary")
    description_meta: Optional[List[str]] = Field(None, alias="description.metaDescription")
    description_keywords: Optional[List[str]] = Field(None, alias="description.keywords")
    description_dataset_id: Optional[List[str]] = Field(None, alias="description.datasetId")


class ESResponseHit(ESModel):
    source: ESSourceDocument = Field(default_factory=ESSourceDocument, alias="_source")
    highlight: ESHighlight = Field(default_factory=ESHighlight)


class ESResponseHits(ESModel):
    total: int = 0
    hits: List[ESResponseHit] = Field(default_factory=list)

    @field_validator("total", mode="before")
    @classmethod
    def _unwrap_total(cls, value: Any) -> Any:
        # Newer backends report {"value": n, "relation": "eq"}
        if isinstance(value, dict):
            return value.get("value", 0)
        return value


class ESBucket(ESModel):
    key: str = ""
    count: int = Field(0, alias="doc_count")


class ESDocCounts(ESModel):
    buckets: List[ESBucket] = Field(default_factory=list)


class ESResponseAggregations(ESModel):
    doc_counts: ESDocCounts = Field(default_factory=ESDocCounts, alias="docCounts")


class ESSearchSuggestOption(ESModel):
    text: str = ""


class ESSearchSuggest(ESModel):
    options: List[ESSearchSuggestOption] = Field(default_factory=list)


class ESSuggest(ESModel):
    search_suggest: List[ESSearchSuggest] = Field(default_factory=list)


class ESResponseItem(ESModel):
    took: int = 0
    hits: ESResponseHits = Field(default_factory=ESResponseHits)
    aggregations: ESResponseAggregations = Field(default_factory=ESResponseAggregations)
    suggest: ESSuggest = Field(default_factory=ESSuggest)


class ESResponse(ESModel):
    responses: List[ESResponseItem] = Field(default_factory=list)
