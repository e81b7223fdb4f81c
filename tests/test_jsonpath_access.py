import pytest
from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse

from chef_helpers import AttributePathAccessor, Node, NodeHelper, StaticDirectory
from chef_helpers.helpers.jsonpath_access import COMPILED_EXPRESSION_CACHE_SIZE, compile_expression


@pytest.fixture()
def node():
    return Node("web01", "prod", {
        "foo": {"bar": 42},
        "plain_key": "value",
        "filesystem": {
            "/dev/sda1": {"mount": "/", "fs_type": "ext4"},
            "/dev/sdb1": {"mount": "/data", "fs_type": "xfs"},
        },
        "roles": ["web", "base"],
    })


def test_dollar_string_matches_direct_evaluation(node):
    accessor = AttributePathAccessor()
    direct = [m.value for m in parse("$.foo.bar").find(node.to_hash())]

    assert accessor.get(node, "$.foo.bar") == direct == [42]


def test_compiled_expression_is_evaluated(node):
    expr = parse("$.filesystem.*.mount")

    assert sorted(AttributePathAccessor().get(node, expr)) == ["/", "/data"]


def test_plain_key_matches_direct_lookup(node):
    accessor = AttributePathAccessor()

    assert accessor.get(node, "plain_key") == node["plain_key"] == "value"
    assert accessor.get(node, "missing") is None


def test_expression_sees_name_and_environment(node):
    accessor = AttributePathAccessor()

    assert accessor.get(node, "$.name") == ["web01"]
    assert accessor.get(node, "$.chef_environment") == ["prod"]


def test_no_match_returns_empty_list(node):
    assert AttributePathAccessor().get(node, "$.nope.nothing") == []


def test_malformed_expression_raises_parser_error(node):
    with pytest.raises(JSONPathError):
        AttributePathAccessor().get(node, "$.foo[")


def test_helper_brackets_dispatch(node):
    helper = NodeHelper(node, StaticDirectory())

    assert helper["$.roles[0]"] == ["web"]
    assert helper["roles"] == ["web", "base"]
    assert helper.get(parse("$.foo.bar")) == [42]


def test_results_do_not_alias_node_attributes(node):
    result = AttributePathAccessor().get(node, "$.foo")
    result[0]["bar"] = 0

    assert node.get("foo.bar") == 42


def test_parsed_expressions_are_cached_with_a_bound(node):
    accessor = AttributePathAccessor()

    accessor.get(node, "$.foo.bar")

    assert compile_expression("$.foo.bar") is compile_expression("$.foo.bar")
    assert compile_expression.cache_info().maxsize == COMPILED_EXPRESSION_CACHE_SIZE


def test_cache_does_not_grow_past_its_bound(node):
    accessor = AttributePathAccessor()

    for i in range(COMPILED_EXPRESSION_CACHE_SIZE + 10):
        assert accessor.get(node, f"$.roles[{i}]") == (["web", "base"][i:i + 1])

    assert compile_expression.cache_info().currsize <= COMPILED_EXPRESSION_CACHE_SIZE
