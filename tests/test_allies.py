import pytest

from chef_helpers import AllyResolver, Node, NodeHelper


def names(nodes):
    return [n.name for n in nodes]


def test_default_environment_without_allies_is_empty(directory):
    node = Node("lonely", "_default", {})

    assert AllyResolver().resolve_allies(node, directory) == []
    assert directory.queries == []


def test_environment_allies_include_every_match(directory):
    node = Node("web01", "prod", {})

    allies = AllyResolver().resolve_allies(node, directory)

    assert directory.queries == ["chef_environment:prod"]
    assert names(allies) == ["web01", "web02", "db01"]


def test_named_and_query_allies_are_issued_in_order(directory):
    node = Node("app", "_default", {"allies": ["web01", "role:db"]})

    allies = AllyResolver().resolve_allies(node, directory)

    assert directory.queries == ["name:web01", "role:db"]
    assert names(allies) == ["web01", "db01", "db02"]


def test_environment_allies_come_before_declared_allies(directory):
    node = Node("web01", "prod", {"allies": ["bastion"]})

    allies = AllyResolver().resolve_allies(node, directory)

    assert directory.queries == ["chef_environment:prod", "name:bastion"]
    assert names(allies) == ["web01", "web02", "db01", "bastion"]


def test_duplicates_are_kept(directory):
    node = Node("web01", "prod", {"allies": ["db01"]})

    allies = AllyResolver().resolve_allies(node, directory)

    assert names(allies) == ["web01", "web02", "db01", "db01"]


def test_empty_allies_list_contributes_nothing(directory):
    node = Node("x", "_default", {"allies": []})

    assert AllyResolver().resolve_allies(node, directory) == []


def test_custom_default_environment(directory):
    node = Node("web01", "prod", {})

    allies = AllyResolver(default_environment="prod").resolve_allies(node, directory)

    assert allies == []
    assert directory.queries == []


def test_missing_environment_skips_environment_query(directory):
    node = Node("web01", None, {"allies": ["bastion"]})

    AllyResolver().resolve_allies(node, directory)

    assert directory.queries == ["name:bastion"]


def test_helper_memoizes_allies(directory):
    helper = NodeHelper(Node("web01", "prod", {"allies": ["bastion"]}), directory)

    first = helper.allies
    second = helper.resolve_allies()

    assert first is second
    assert directory.queries == ["chef_environment:prod", "name:bastion"]


def test_helper_does_not_mutate_node(directory):
    node = Node("web01", "prod", {"allies": ["bastion"]})
    before = node.to_hash()

    NodeHelper(node, directory).allies

    assert node.to_hash() == before


def test_directory_errors_propagate_unchanged(fleet, recording_directory_cls):
    directory = recording_directory_cls(fleet, fail_on="name:bastion")
    helper = NodeHelper(Node("web01", "prod", {"allies": ["bastion"]}), directory)

    with pytest.raises(ConnectionError, match="backend down"):
        helper.allies

    # Nothing was cached; the next call queries again
    directory.fail_on = None
    assert names(helper.allies) == ["web01", "web02", "db01", "bastion"]
