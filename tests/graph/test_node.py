"""
Test Node
=========

Unit tests for Node rendering and alias handling.
"""

from redisgraph_client import Node


class TestNodeRender:
    """Test Node.render()."""

    def test_full_node(self, alice):
        assert alice.render() == '(a:Person {name: "Alice", age: 30})'

    def test_alias_only(self):
        assert Node(alias="x").render() == "(x)"

    def test_label_without_properties(self):
        assert Node(alias="x", label="City").render() == "(x:City)"

    def test_properties_without_label(self):
        assert Node(alias="x", properties={"n": 1}).render() == "(x {n: 1})"

    def test_empty_properties_are_omitted(self):
        assert Node(alias="x", label="City", properties={}).render() == "(x:City)"

    def test_missing_alias_renders_empty(self):
        assert Node(label="City").render() == "(:City)"

    def test_str_matches_render(self, alice):
        assert str(alice) == alice.render()

    def test_server_id_is_not_rendered(self):
        assert Node(node_id=42, alias="x").render() == "(x)"


class TestNodeAlias:
    """Test alias accessors."""

    def test_alias_defaults_to_none(self):
        assert Node().get_alias() is None

    def test_set_alias(self):
        node = Node()
        node.set_alias("n1")
        node.set_alias("n1")

        assert node.get_alias() == "n1"
        assert node.render() == "(n1)"
