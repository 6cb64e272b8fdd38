"""
Retrieval request and response models.

Wire contract of the external knowledge API: the platform posts a query with
retrieval settings and receives an ordered list of records.

Dependencies: pydantic
System role: External knowledge API data contract
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class RetrievalSetting(BaseModel):
    """Client-supplied retrieval parameters."""

    top_k: int = Field(..., ge=1, le=100, description="Maximum number of records to return")
    score_threshold: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Records must score strictly above this value",
    )


class Condition(BaseModel):
    """Single metadata comparison."""

    name: list[str] = Field(..., min_length=1, description="Metadata keys the comparison applies to")
    comparison_operator: str = Field(..., description="Comparison operator, e.g. 'is', 'contains', '>'")
    value: str | int | float | list[str | int | float] | None = Field(
        default=None,
        description="Value to compare against",
    )


class MetadataCondition(BaseModel):
    """Metadata filter combining one or more conditions."""

    logical_operator: Literal["and", "or"] = Field(default="and")
    conditions: list[Condition] = Field(default_factory=list)


class RetrievalRequest(BaseModel):
    """Request body for POST /retrieval."""

    knowledge_id: str = Field(..., min_length=1, description="Knowledge base identifier")
    query: str = Field(..., min_length=1, description="User query text")
    retrieval_setting: RetrievalSetting
    metadata_condition: MetadataCondition | None = Field(
        default=None,
        description="Optional metadata filter",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "knowledge_id": "AAAAAAAAAA",
                "query": "What is the refund policy?",
                "retrieval_setting": {"top_k": 5, "score_threshold": 0.5},
            }
        }
    )


class Record(BaseModel):
    """Single retrieved chunk."""

    content: str = Field(..., description="Chunk text")
    score: float = Field(..., description="Relevance score reported by the provider")
    title: str = Field(..., description="Source document locator")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Provider metadata for the chunk")


class RetrievalResponse(BaseModel):
    """Response for POST /retrieval."""

    records: list[Record] = Field(default_factory=list)
