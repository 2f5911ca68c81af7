import pytest

from tritongraph.node import Node


@pytest.fixture
def existing():
    return Node(512, 1, "existing", {"name": "max", "age": 99, "weight": 230.5})


def test_default_node_is_blank():
    node = Node()
    assert (node.id, node.type_id, node.key) == (0, 0, "")
    assert node.properties == {}


def test_constructor_fields(existing):
    assert existing.id == 512
    assert existing.type_id == 1
    assert existing.key == "existing"


def test_constructor_properties_round_trip(existing):
    assert existing.properties == {"name": "max", "age": 99, "weight": 230.5}


def test_get_property(existing):
    assert existing.get_property("name") == "max"
    assert existing.get_property("age") == 99
    assert existing.get_property("not_there") is None


def test_set_property_adds_and_replaces(existing):
    existing.set_property("name", "alex")
    existing.set_property("new", True)
    assert existing.get_property("name") == "alex"
    assert existing.get_property("new") is True
    assert len(existing.properties) == 4


def test_delete_property(existing):
    assert existing.delete_property("age") is True
    assert existing.get_property("age") is None
    assert existing.delete_property("age") is False


def test_set_properties_replaces_all(existing):
    existing.set_properties({"eyes": "brown", "height": 5.11})
    assert existing.properties == {"eyes": "brown", "height": 5.11}
    assert existing.get_property("name") is None


def test_clear_properties(existing):
    existing.clear_properties()
    assert existing.properties == {}
    assert existing.get_property("name") is None


def test_str_without_properties():
    assert str(Node(256, 1, "empty")) == (
        '{ "id": 256, "type_id": 1, "key": "empty", "properties": {  } }'
    )


def test_str_with_scalar_properties():
    node = Node(512, 1, "existing", {"name": "max", "age": 99, "weight": 230.5, "active": True})
    assert str(node) == (
        '{ "id": 512, "type_id": 1, "key": "existing", "properties": '
        '{ "active": true, "age": 99, "name": "max", "weight": 230.5 } }'
    )


def test_str_with_list_properties():
    node = Node(1, 1, "k", {"flags": [True, False], "tags": ["a", "b"]})
    assert str(node) == (
        '{ "id": 1, "type_id": 1, "key": "k", "properties": '
        '{ "flags": [1, 0], "tags": [a, b] } }'
    )


def test_str_follows_insertion_order(existing):
    existing.set_property("name", "alex")
    text = str(existing)
    assert text.index('"age"') < text.index('"weight"') < text.index('"name"')
    assert '"name": "alex"' in text