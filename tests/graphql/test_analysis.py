"""
Unit tests for static query cost analysis
"""

from types import SimpleNamespace

import pytest
from graphql import FragmentDefinitionNode, OperationDefinitionNode, parse

from starwars.graphql.analysis import (
    ComplexityExceeded,
    DepthExceeded,
    QueryCost,
    QueryLimits,
    analyze_operation,
)
from starwars.graphql.schema import graphql_schema


def analyze(query: str, limits: QueryLimits | None = None):
    document = parse(query)
    operations = [d for d in document.definitions if isinstance(d, OperationDefinitionNode)]
    fragments = {
        d.name.value: d for d in document.definitions if isinstance(d, FragmentDefinitionNode)
    }
    return analyze_operation(graphql_schema(), operations[0], fragments, limits)


def nested_friends(levels: int) -> str:
    """hero plus ``levels`` nested friends selections ending in name."""
    return "{ hero { " + "friends { " * levels + "name" + " }" * levels + " } }"


FLAT = QueryLimits(list_multipliers={})


class TestDepth:
    def test_flat_query(self):
        assert analyze("{ hero { name } }") == QueryCost(depth=2, complexity=2)

    def test_depth_at_limit_is_accepted(self):
        # hero (1) + 13 friends levels + name = 15
        result = analyze(nested_friends(13), FLAT)

        assert isinstance(result, QueryCost)
        assert result.depth == 15

    def test_depth_over_limit_is_rejected(self):
        result = analyze(nested_friends(14))

        assert isinstance(result, DepthExceeded)
        assert result.max_depth == 15
        assert result.path == ("hero",) + ("friends",) * 14 + ("name",)
        assert result.node.name.value == "name"
        assert result.message == "Max query depth 15 is reached."

    def test_fragments_add_no_depth(self):
        query = """
            query { hero { ...Names } }
            fragment Names on Character { name friends { ... on Human { name } } }
        """

        assert analyze(query).depth == 3

    def test_depth_through_fragments_is_counted(self):
        inner = "friends { " * 14 + "name" + " }" * 14
        query = "{ hero { ...F } } fragment F on Character { " + inner + " }"

        assert isinstance(analyze(query), DepthExceeded)

    def test_custom_limit(self):
        result = analyze("{ hero { friends { name } } }", QueryLimits(max_depth=2))

        assert isinstance(result, DepthExceeded)
        assert result.path == ("hero", "friends", "name")

    def test_alias_used_in_path(self):
        result = analyze("{ h: hero { f: friends { name } } }", QueryLimits(max_depth=2))

        assert result.path == ("h", "f", "name")

    def test_error_carries_location(self):
        result = analyze("{ hero { friends { name } } }", QueryLimits(max_depth=2))

        formatted = result.as_graphql_error().formatted
        assert formatted["locations"] == [{"line": 1, "column": 20}]
        assert formatted["path"] == ["hero", "friends", "name"]


class TestComplexity:
    def test_each_field_costs_one(self):
        result = analyze("{ hero { id name appearsIn friends { name } } }", FLAT)

        assert result.complexity == 6

    def test_friends_weighted_by_default(self):
        result = analyze("{ hero { friends { name } } }")

        assert result.complexity == 1 + 1 + 4

    def test_friends_chain_within_depth_rejected_by_default(self):
        result = analyze(nested_friends(13))

        assert isinstance(result, ComplexityExceeded)

    def test_list_multiplier_scales_descendants(self):
        limits = QueryLimits(list_multipliers={"Character.friends": 10})

        result = analyze("{ hero { name friends { name friends { name } } } }", limits)

        # hero 1, name 1, friends 1, (name + friends) x10, name x100
        assert result.complexity == 1 + 1 + 1 + 20 + 100

    def test_multiplier_found_on_concrete_type(self):
        limits = QueryLimits(list_multipliers={"Human.friends": 5})

        result = analyze('{ human(id: "1000") { friends { name } } }', limits)

        assert result.complexity == 1 + 1 + 5

    def test_interface_multiplier_applies_to_implementations(self):
        limits = QueryLimits(list_multipliers={"Character.friends": 5})

        result = analyze('{ droid(id: "2001") { friends { name } } }', limits)

        assert result.complexity == 1 + 1 + 5

    def test_multiplier_ignored_on_non_list_field(self):
        limits = QueryLimits(list_multipliers={"Query.hero": 100})

        assert analyze("{ hero { name } }", limits).complexity == 2

    def test_too_complex_rejected(self):
        limits = QueryLimits(list_multipliers={"Character.friends": 20})

        result = analyze(nested_friends(4), limits)

        assert isinstance(result, ComplexityExceeded)
        assert result.message == "Query is too expensive."
        assert result.complexity > 4000

    def test_wide_query_rejected_with_default_weights(self):
        fields = " ".join(f"a{i}: hero {{ name }}" for i in range(2001))

        result = analyze("{ " + fields + " }")

        assert isinstance(result, ComplexityExceeded)

    def test_at_ceiling_is_accepted(self):
        fields = " ".join(f"a{i}: hero {{ name }}" for i in range(2000))

        assert analyze("{ " + fields + " }").complexity == 4000

    def test_introspection_is_within_limits(self):
        from graphql import get_introspection_query

        assert isinstance(analyze(get_introspection_query()), QueryCost)


def test_limits_from_settings():
    settings = SimpleNamespace(
        max_query_depth=3, max_query_complexity=50, complexity_multipliers={"Character.friends": 2}
    )

    limits = QueryLimits.from_settings(settings)

    assert limits == QueryLimits(
        max_depth=3, max_complexity=50, list_multipliers={"Character.friends": 2}
    )


@pytest.mark.parametrize("query", ["{ __typename }", "{ __schema { queryType { name } } }"])
def test_meta_fields(query):
    assert isinstance(analyze(query), QueryCost)


def test_default_settings_weight_friends():
    from starwars.config import Settings

    limits = QueryLimits.from_settings(Settings())

    assert limits.list_multipliers == {"Character.friends": 4}
