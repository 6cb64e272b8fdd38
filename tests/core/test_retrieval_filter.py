"""Unit tests for retrieval result filtering and metadata filter translation."""

import pytest

from knowledge_bridge.core.exceptions import InvalidMetadataConditionError
from knowledge_bridge.core.retrieval_filter import (
    build_retrieval_filter,
    filter_and_map,
    resolve_title,
)
from knowledge_bridge.models.retrieval import MetadataCondition


def _result(score, text="chunk", metadata=None, location=None):
    return {
        "content": {"text": text},
        "location": location or {},
        "score": score,
        "metadata": metadata if metadata is not None else {},
    }


class TestFilterAndMap:
    """Tests for filter_and_map()."""

    def test_score_equal_to_threshold_is_excluded(self) -> None:
        records = filter_and_map([_result(0.5)], score_threshold=0.5, top_k=5, knowledge_id="KB1")
        assert records == []

    def test_score_below_threshold_is_excluded(self) -> None:
        records = filter_and_map([_result(0.49)], score_threshold=0.5, top_k=5, knowledge_id="KB1")
        assert records == []

    def test_score_above_threshold_is_included_with_mapped_fields(self) -> None:
        candidate = _result(
            0.8,
            text="Paris is the capital of France.",
            metadata={"x-amz-bedrock-kb-source-uri": "s3://docs/france.pdf", "page": 3},
        )

        records = filter_and_map([candidate], score_threshold=0.5, top_k=5, knowledge_id="KB1")

        assert len(records) == 1
        record = records[0]
        assert record.content == "Paris is the capital of France."
        assert record.score == 0.8
        assert record.title == "s3://docs/france.pdf"
        assert record.metadata == {"x-amz-bedrock-kb-source-uri": "s3://docs/france.pdf", "page": 3}

    def test_result_count_respects_top_k(self) -> None:
        candidates = [_result(0.9), _result(0.8), _result(0.7), _result(0.6)]

        records = filter_and_map(candidates, score_threshold=0.0, top_k=2, knowledge_id="KB1")

        assert [r.score for r in records] == [0.9, 0.8]

    def test_provider_order_is_preserved(self) -> None:
        candidates = [_result(0.6, text="a"), _result(0.9, text="b"), _result(0.2, text="c")]

        records = filter_and_map(candidates, score_threshold=0.5, top_k=5, knowledge_id="KB1")

        assert [r.content for r in records] == ["a", "b"]

    def test_missing_score_is_excluded(self) -> None:
        candidate = _result(None)
        records = filter_and_map([candidate], score_threshold=0.0, top_k=5, knowledge_id="KB1")
        assert records == []

    def test_missing_metadata_and_content_default_to_empty(self) -> None:
        records = filter_and_map([{"score": 0.9}], score_threshold=0.0, top_k=5, knowledge_id="KB1")

        assert records[0].content == ""
        assert records[0].metadata == {}
        assert records[0].title == "KB1"

    def test_empty_candidates_returns_empty_list(self) -> None:
        assert filter_and_map([], score_threshold=0.0, top_k=5, knowledge_id="KB1") == []


class TestResolveTitle:
    """Tests for resolve_title()."""

    def test_prefers_source_uri_metadata(self) -> None:
        candidate = _result(
            0.9,
            metadata={"x-amz-bedrock-kb-source-uri": "s3://docs/a.pdf"},
            location={"type": "S3", "s3Location": {"uri": "s3://docs/other.pdf"}},
        )
        assert resolve_title(candidate, "KB1") == "s3://docs/a.pdf"

    @pytest.mark.parametrize(
        "location, expected",
        [
            ({"type": "S3", "s3Location": {"uri": "s3://docs/b.pdf"}}, "s3://docs/b.pdf"),
            ({"type": "WEB", "webLocation": {"url": "https://example.com"}}, "https://example.com"),
            (
                {"type": "CONFLUENCE", "confluenceLocation": {"url": "https://wiki/page"}},
                "https://wiki/page",
            ),
            ({"type": "CUSTOM", "customDocumentLocation": {"id": "doc-7"}}, "doc-7"),
        ],
    )
    def test_falls_back_to_location(self, location: dict, expected: str) -> None:
        assert resolve_title(_result(0.9, location=location), "KB1") == expected

    def test_falls_back_to_knowledge_id(self) -> None:
        assert resolve_title(_result(0.9), "KB1") == "KB1"


class TestBuildRetrievalFilter:
    """Tests for build_retrieval_filter()."""

    def test_none_returns_none(self) -> None:
        assert build_retrieval_filter(None) is None

    def test_empty_conditions_returns_none(self) -> None:
        assert build_retrieval_filter(MetadataCondition(conditions=[])) is None

    def test_single_condition_is_returned_bare(self) -> None:
        condition = MetadataCondition.model_validate(
            {"conditions": [{"name": ["year"], "comparison_operator": ">", "value": 2020}]}
        )
        assert build_retrieval_filter(condition) == {
            "greaterThan": {"key": "year", "value": 2020}
        }

    def test_and_combines_with_and_all(self) -> None:
        condition = MetadataCondition.model_validate(
            {
                "logical_operator": "and",
                "conditions": [
                    {"name": ["category"], "comparison_operator": "is", "value": "policy"},
                    {"name": ["title"], "comparison_operator": "contains", "value": "refund"},
                ],
            }
        )
        assert build_retrieval_filter(condition) == {
            "andAll": [
                {"equals": {"key": "category", "value": "policy"}},
                {"stringContains": {"key": "title", "value": "refund"}},
            ]
        }

    def test_or_combines_with_or_all(self) -> None:
        condition = MetadataCondition.model_validate(
            {
                "logical_operator": "or",
                "conditions": [
                    {"name": ["lang"], "comparison_operator": "≠", "value": "de"},
                    {"name": ["year"], "comparison_operator": "≤", "value": 2019},
                ],
            }
        )
        assert build_retrieval_filter(condition) == {
            "orAll": [
                {"notEquals": {"key": "lang", "value": "de"}},
                {"lessThanOrEquals": {"key": "year", "value": 2019}},
            ]
        }

    def test_multiple_names_expand_to_one_filter_each(self) -> None:
        condition = MetadataCondition.model_validate(
            {"conditions": [{"name": ["author", "editor"], "comparison_operator": "is", "value": "kim"}]}
        )
        assert build_retrieval_filter(condition) == {
            "andAll": [
                {"equals": {"key": "author", "value": "kim"}},
                {"equals": {"key": "editor", "value": "kim"}},
            ]
        }

    def test_in_operator_wraps_scalar_value(self) -> None:
        condition = MetadataCondition.model_validate(
            {"conditions": [{"name": ["tag"], "comparison_operator": "in", "value": "faq"}]}
        )
        assert build_retrieval_filter(condition) == {"in": {"key": "tag", "value": ["faq"]}}

    def test_unsupported_operator_raises(self) -> None:
        condition = MetadataCondition.model_validate(
            {"conditions": [{"name": ["tag"], "comparison_operator": "end with", "value": "x"}]}
        )
        with pytest.raises(InvalidMetadataConditionError) as exc_info:
            build_retrieval_filter(condition)
        assert exc_info.value.details["operator"] == "end with"

    def test_missing_value_raises(self) -> None:
        condition = MetadataCondition.model_validate(
            {"conditions": [{"name": ["tag"], "comparison_operator": "is"}]}
        )
        with pytest.raises(InvalidMetadataConditionError):
            build_retrieval_filter(condition)

    def test_list_value_for_scalar_operator_raises(self) -> None:
        condition = MetadataCondition.model_validate(
            {"conditions": [{"name": ["tag"], "comparison_operator": "is", "value": ["a", "b"]}]}
        )
        with pytest.raises(InvalidMetadataConditionError):
            build_retrieval_filter(condition)

    def test_in_operator_accepts_mixed_list(self) -> None:
        condition = MetadataCondition.model_validate(
            {
                "conditions": [
                    {"name": ["tag"], "comparison_operator": "in", "value": ["faq", 2024]}
                ]
            }
        )
        assert build_retrieval_filter(condition) == {
            "in": {"key": "tag", "value": ["faq", 2024]}
        }

    def test_numeric_comparison_keeps_number(self) -> None:
        condition = MetadataCondition.model_validate(
            {"conditions": [{"name": ["year"], "comparison_operator": "≥", "value": 2020}]}
        )
        assert build_retrieval_filter(condition) == {
            "greaterThanOrEquals": {"key": "year", "value": 2020}
        }

    @pytest.mark.parametrize(
        ("operator", "value"),
        [
            ("contains", 5),
            ("start with", 3.5),
            (">", "2020"),
            ("before", "2024-01-01"),
            ("≤", "10"),
        ],
    )
    def test_value_type_mismatch_raises(self, operator: str, value) -> None:
        condition = MetadataCondition.model_validate(
            {"conditions": [{"name": ["field"], "comparison_operator": operator, "value": value}]}
        )
        with pytest.raises(InvalidMetadataConditionError) as exc_info:
            build_retrieval_filter(condition)
        assert exc_info.value.details["operator"] == operator
