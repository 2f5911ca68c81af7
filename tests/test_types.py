from tritongraph.types import Types


def make_types():
    types = Types()
    types.add_type_id("Node", 1)
    types.add_type_id("User", 2)
    return types


def test_fresh_registry_is_empty():
    types = Types()
    assert types.size() == 0
    assert types.get_types() == set()
    assert types.get_type_ids() == set()
    assert types.get_counts() == {}


def test_empty_type_is_id_zero():
    types = Types()
    assert types.get_type_id("") == 0
    assert types.get_type(0) == ""


def test_insert_or_get_is_stable():
    types = Types()
    first = types.insert_or_get_type_id("Node")
    assert types.insert_or_get_type_id("Node") == first
    assert types.get_type_id("Node") == first
    assert types.get_type(first) == "Node"
    assert types.size() == 1


def test_insert_assigns_distinct_ids():
    types = Types()
    a = types.insert_or_get_type_id("Node")
    b = types.insert_or_get_type_id("User")
    assert a != b
    assert types.get_type_ids() == {a, b}
    assert types.get_types() == {"Node", "User"}


def test_unknown_lookups():
    types = make_types()
    assert types.get_type_id("Wrong") == 0
    assert types.get_type(99) == ""


def test_add_type_id_rejects_duplicates():
    types = make_types()
    assert types.add_type_id("Node", 5) is False
    assert types.add_type_id("Other", 1) is False
    assert types.size() == 2


def test_validity():
    types = make_types()
    assert types.is_valid_type_id(1)
    assert types.is_valid_type_id(2)
    assert not types.is_valid_type_id(0)
    assert not types.is_valid_type_id(99)


def test_add_contains_remove():
    types = make_types()
    assert types.add_id(1, 256) is True
    assert types.contains_id(1, 256)
    assert not types.contains_id(2, 256)
    assert types.remove_id(1, 256) is True
    assert not types.contains_id(1, 256)


def test_invalid_type_operations_fail():
    types = make_types()
    assert types.add_id(99, 256) is False
    assert types.remove_id(99, 256) is False
    assert types.contains_id(99, 256) is False
    assert types.add_id(0, 256) is False
    assert types.get_count(99) == 0


def test_counts_and_ids():
    types = make_types()
    for node_id in (256, 512, 768, 1024, 1280, 1536):
        types.add_id(1, node_id)
    types.add_id(2, 1792)
    types.add_id(2, 2048)
    assert types.get_count(1) == 6
    assert types.get_count(2) == 2
    assert types.get_counts() == {1: 6, 2: 2}
    assert types.get_ids(2) == {1792, 2048}
    assert len(types.get_ids()) == 8
    assert types.get_ids(99) == set()


def test_get_ids_returns_copy():
    types = make_types()
    types.add_id(1, 256)
    ids = types.get_ids(1)
    ids.add(999)
    assert not types.contains_id(1, 999)
    assert types.get_count(1) == 1