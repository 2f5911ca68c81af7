# tritongraph

Building blocks for an in-memory property graph: typed nodes and
relationships, property storage, a type registry and JSON output.

## Modules

- `tritongraph.property`
  - `Property` holds one key/value pair. Its key is interned in a table that
    all properties share, and `Property.key` reads the name back.
  - `PropertyContainer` is the property storage that nodes and relationships
    share. It offers `get_property` (returns `None` when the name is unset),
    `set_property`, `delete_property` (returns whether the name was present),
    `set_properties` (replaces all properties), `clear_properties`, the
    `properties` dictionary (ordered by name) and `property_items()`, which
    yields pairs in insertion order.
- `tritongraph.types`
  - `Types` maps type names to small integer ids and records which object ids
    belong to each type. Its methods are `get_type_id`,
    `insert_or_get_type_id`, `get_type`, `add_type_id`, `add_id`,
    `remove_id`, `contains_id`, `get_ids`, `get_count`, `get_counts`,
    `get_types`, `get_type_ids`, `is_valid_type_id` and `size`.
- `tritongraph.ids`
  - `Ids` is a frozen pair of `node_id` and `rel_id`.
  - `Group` is a `rel_type_id` together with a list of `Ids`.
- `tritongraph.node`
  - `Node` is a vertex with `id`, `type_id`, `key` and properties. `str(node)`
    gives a one-line JSON-like text form.
- `tritongraph.relationship`
  - `Relationship` is a directed edge with `id`, `starting_node_id`,
    `ending_node_id`, `type_id` and properties. `str(relationship)` gives a
    one-line text form that shows scalar properties only.
- `tritongraph.json_output`
  - `PropertiesBuilder` and `properties_to_json` write a property map as a
    JSON object, members sorted by name. Nested maps are flattened into the
    enclosing object, and values of unsupported kinds are left out.
  - `ValuesBuilder` writes a JSON array of scalar values and property maps.
  - `NodeJson` and `RelationshipJson` describe a node or relationship with its
    type given by name; `to_json()` returns the JSON text.
  - Non-finite floats raise `ValueError`.

## Type ids

Type id 0 is the blank type and is never valid. Looking up an unknown name
returns 0, and looking up an unknown id returns the empty name. On an invalid
type id, `add_id`, `remove_id` and `contains_id` return `False`, `get_count`
returns 0 and `get_ids` returns an empty set; none of them raises.
`add_type_id` returns `False` if the name or the id is already taken and
`True` once it has registered the pair.

## Example

```python
from tritongraph.types import Types
from tritongraph.node import Node
from tritongraph.relationship import Relationship
from tritongraph.json_output import NodeJson, RelationshipJson

node_types = Types()
user = node_types.insert_or_get_type_id("User")   # 1
node_types.add_id(user, 256)

alice = Node(256, user, "alice", {"name": "Alice", "age": 30})
bob = Node(512, user, "bob")

alice.set_property("active", True)
print(alice.get_property("name"))   # Alice
print(alice)   # { "id": 256, "type_id": 1, "key": "alice", "properties": { ... } }

rel_types = Types()
knows = rel_types.insert_or_get_type_id("KNOWS")
edge = Relationship(256, alice.id, bob.id, knows, {"since": 2020})

print(NodeJson.from_node(alice, "User").to_json())
print(RelationshipJson.from_relationship(edge, "KNOWS").to_json())
```

## What this package does not do

It is a library of data structures only. It has no graph store that ties
nodes, relationships and types together, no queries, traversals or degree
counts, no persistence, no HTTP server and no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```