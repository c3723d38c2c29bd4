"""Pydantic models for Semantic Scholar API payloads.

These models map directly to the Academic Graph, Recommendations and
Datasets API schemas. Every model is frozen and ignores unknown keys so the
client keeps working when the upstream schema grows.
See: https://api.semanticscholar.org/api-docs
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


# -----------------------------------------------------------------------------
# Graph API
# -----------------------------------------------------------------------------


class S2Author(BaseModel):
    """Semantic Scholar author information.

    Note: Most fields are only present when requested through ``fields``.
    """

    author_id: str | None = Field(None, alias="authorId")
    external_ids: dict[str, Any] | None = Field(None, alias="externalIds")
    name: str | None = None
    url: str | None = None
    affiliations: list[str] | None = None
    h_index: int | None = Field(None, alias="hIndex")
    paper_count: int | None = Field(None, alias="paperCount")
    citation_count: int | None = Field(None, alias="citationCount")
    papers: list[S2Paper] | None = None

    model_config = _MODEL_CONFIG


class S2Paper(BaseModel):
    """Semantic Scholar paper information.

    All fields are optional because API returns vary by requested fields.
    ``open_access_pdf`` is kept as an untyped mapping.
    """

    # Identifiers
    paper_id: str | None = Field(None, alias="paperId")
    corpus_id: int | None = Field(None, alias="corpusId")
    external_ids: dict[str, Any] | None = Field(None, alias="externalIds")

    # Bibliographic
    title: str | None = None
    abstract: str | None = None
    url: str | None = None
    venue: str | None = None
    year: int | None = None
    publication_date: str | None = Field(None, alias="publicationDate")
    publication_types: list[str] | None = Field(None, alias="publicationTypes")

    # Metrics
    citation_count: int | None = Field(None, alias="citationCount")
    reference_count: int | None = Field(None, alias="referenceCount")

    authors: list[S2Author] | None = None
    fields_of_study: list[str] | None = Field(None, alias="fieldsOfStudy")

    # Access
    is_open_access: bool | None = Field(None, alias="isOpenAccess")
    open_access_pdf: dict[str, Any] | None = Field(None, alias="openAccessPdf")

    model_config = _MODEL_CONFIG

    @property
    def doi(self) -> str | None:
        """Extract DOI from external IDs."""
        if self.external_ids:
            return self.external_ids.get("DOI")
        return None

    @property
    def arxiv_id(self) -> str | None:
        """Extract arXiv ID from external IDs."""
        if self.external_ids:
            return self.external_ids.get("ArXiv")
        return None

    @property
    def first_author_name(self) -> str | None:
        if self.authors:
            return self.authors[0].name
        return None


class S2AuthorSearchResult(BaseModel):
    """Result page from the author search endpoint."""

    total: int = 0
    offset: int = 0
    next_offset: int | None = Field(None, alias="next")
    data: list[S2Author] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class S2PaperSearchResult(BaseModel):
    """Result page from paper search, bulk search, match search and author papers.

    Bulk search pages carry a continuation ``token`` instead of ``next``.
    """

    total: int = 0
    offset: int = 0
    next_offset: int | None = Field(None, alias="next")
    token: str | None = None
    data: list[S2Paper] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class S2BatchRequest(BaseModel):
    """Body of the author and paper batch endpoints."""

    ids: list[str]

    model_config = _MODEL_CONFIG


# -----------------------------------------------------------------------------
# Recommendations API
# -----------------------------------------------------------------------------


class S2RecommendationRequest(BaseModel):
    """Positive and negative example papers for recommendations."""

    positive: list[str]
    negative: list[str] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class S2RecommendationResult(BaseModel):
    recommended_papers: list[S2Paper] = Field(default_factory=list, alias="recommendedPapers")

    model_config = _MODEL_CONFIG


# -----------------------------------------------------------------------------
# Datasets API
# -----------------------------------------------------------------------------


class S2DatasetSummary(BaseModel):
    """A dataset listed in a release."""

    name: str | None = None
    description: str | None = None
    readme: str | None = Field(None, alias="README")

    model_config = _MODEL_CONFIG


class S2Release(BaseModel):
    """Metadata describing one dataset release."""

    release_id: str | None = None
    readme: str | None = Field(None, alias="README")
    datasets: list[S2DatasetSummary] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class S2DatasetMetadata(BaseModel):
    """A dataset within a release, with its download links."""

    name: str | None = None
    description: str | None = None
    readme: str | None = Field(None, alias="README")
    files: list[str] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class S2DatasetDiff(BaseModel):
    """Files to apply when moving a dataset from one release to the next."""

    from_release: str | None = None
    to_release: str | None = None
    update_files: list[str] = Field(default_factory=list)
    delete_files: list[str] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


class S2DatasetDiffList(BaseModel):
    """Ordered diffs needed to bring a dataset from start_release to end_release."""

    dataset: str | None = None
    start_release: str | None = None
    end_release: str | None = None
    diffs: list[S2DatasetDiff] = Field(default_factory=list)

    model_config = _MODEL_CONFIG


S2Author.model_rebuild()
