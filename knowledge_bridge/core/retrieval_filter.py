"""
Retrieval result filtering and metadata filter translation.

Turns Bedrock `retrievalResults` into external knowledge API records and
translates platform metadata conditions into a Bedrock `RetrievalFilter`.

Dependencies: knowledge_bridge.models.retrieval, knowledge_bridge.core.exceptions
System role: Provider-to-contract translation (pure functions)
"""

from typing import Any

from knowledge_bridge.core.exceptions import InvalidMetadataConditionError
from knowledge_bridge.models.retrieval import Condition, MetadataCondition, Record

SOURCE_URI_METADATA_KEY = "x-amz-bedrock-kb-source-uri"

# (location object key, field holding the locator)
_LOCATION_FIELDS: tuple[tuple[str, str], ...] = (
    ("s3Location", "uri"),
    ("webLocation", "url"),
    ("confluenceLocation", "url"),
    ("salesforceLocation", "url"),
    ("sharePointLocation", "url"),
    ("customDocumentLocation", "id"),
    ("kendraDocumentLocation", "uri"),
)

COMPARISON_OPERATORS: dict[str, str] = {
    "is": "equals",
    "=": "equals",
    "is not": "notEquals",
    "≠": "notEquals",
    ">": "greaterThan",
    "after": "greaterThan",
    "<": "lessThan",
    "before": "lessThan",
    "≥": "greaterThanOrEquals",
    "≤": "lessThanOrEquals",
    "contains": "stringContains",
    "start with": "startsWith",
    "in": "in",
    "not in": "notIn",
}

STRING_OPERATORS = frozenset({"stringContains", "startsWith"})
NUMERIC_OPERATORS = frozenset(
    {"greaterThan", "lessThan", "greaterThanOrEquals", "lessThanOrEquals"}
)


def resolve_title(candidate: dict[str, Any], fallback: str) -> str:
    """
    Pick a human-readable source locator for a retrieval result.

    Order: source URI metadata, then the typed location, then `fallback`.
    """
    metadata = candidate.get("metadata") or {}
    source_uri = metadata.get(SOURCE_URI_METADATA_KEY)
    if source_uri:
        return str(source_uri)

    location = candidate.get("location") or {}
    for location_key, field in _LOCATION_FIELDS:
        locator = (location.get(location_key) or {}).get(field)
        if locator:
            return str(locator)
    return fallback


def filter_and_map(
    candidates: list[dict[str, Any]],
    score_threshold: float,
    top_k: int,
    knowledge_id: str,
) -> list[Record]:
    """
    Keep candidates scoring above the threshold and map them to records.

    Args:
        candidates: Bedrock retrievalResults, in provider order
        score_threshold: Candidates scoring at or below this are dropped
        top_k: Maximum number of records returned
        knowledge_id: Title fallback when a result has no locator

    Returns:
        list[Record]: At most top_k records, provider order preserved
    """
    records: list[Record] = []
    for candidate in candidates:
        if len(records) >= top_k:
            break
        score = candidate.get("score")
        if score is None or score <= score_threshold:
            continue
        content = candidate.get("content") or {}
        records.append(
            Record(
                content=content.get("text", ""),
                score=float(score),
                title=resolve_title(candidate, knowledge_id),
                metadata=dict(candidate.get("metadata") or {}),
            )
        )
    return records


def _condition_filters(condition: Condition) -> list[dict[str, Any]]:
    operator = condition.comparison_operator.strip().lower()
    bedrock_operator = COMPARISON_OPERATORS.get(operator)
    if bedrock_operator is None:
        raise InvalidMetadataConditionError(
            f"Unsupported comparison operator: {condition.comparison_operator}",
            operator=condition.comparison_operator,
        )
    if condition.value is None:
        raise InvalidMetadataConditionError(
            f"Comparison operator '{condition.comparison_operator}' requires a value",
            operator=condition.comparison_operator,
        )

    value = condition.value
    if bedrock_operator in ("in", "notIn"):
        if not isinstance(value, list):
            value = [value]
    elif isinstance(value, list):
        raise InvalidMetadataConditionError(
            f"Comparison operator '{condition.comparison_operator}' takes a single value",
            operator=condition.comparison_operator,
        )
    elif bedrock_operator in STRING_OPERATORS and not isinstance(value, str):
        raise InvalidMetadataConditionError(
            f"Comparison operator '{condition.comparison_operator}' requires a string value",
            operator=condition.comparison_operator,
        )
    elif bedrock_operator in NUMERIC_OPERATORS and (
        isinstance(value, bool) or not isinstance(value, (int, float))
    ):
        raise InvalidMetadataConditionError(
            f"Comparison operator '{condition.comparison_operator}' requires a numeric value",
            operator=condition.comparison_operator,
        )

    return [{bedrock_operator: {"key": name, "value": value}} for name in condition.name]


def build_retrieval_filter(metadata_condition: MetadataCondition | None) -> dict[str, Any] | None:
    """
    Translate a platform metadata condition into a Bedrock RetrievalFilter.

    Bedrock requires at least two members in andAll/orAll, so a single
    comparison is returned bare.

    Args:
        metadata_condition: Condition from the request, or None

    Returns:
        dict | None: RetrievalFilter, or None when there is nothing to filter on

    Raises:
        InvalidMetadataConditionError: Unsupported operator or malformed value
    """
    if metadata_condition is None or not metadata_condition.conditions:
        return None

    filters: list[dict[str, Any]] = []
    for condition in metadata_condition.conditions:
        filters.extend(_condition_filters(condition))

    if len(filters) == 1:
        return filters[0]
    combinator = "andAll" if metadata_condition.logical_operator == "and" else "orAll"
    return {combinator: filters}
