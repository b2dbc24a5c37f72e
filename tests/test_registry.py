"""Tests for the per-scan node registry."""

import random

from graphscan.models import Node, NodeType
from graphscan.registry import NodeRegistry


def _file(path: str, name: str = "") -> Node:
    return Node(id="", name=name or path.rsplit("/", 1)[-1], type=NodeType.FILE, path=path)


def test_register_assigns_unique_ids():
    registry = NodeRegistry()
    nodes = [_file(f"src/f{i}.js") for i in range(200)]
    for node in nodes:
        assert registry.register(node.path, node)

    ids = [n.id for n in registry.all()]
    assert len(set(ids)) == 200
    assert all(i.startswith("id_") and len(i) == 12 for i in ids)


def test_first_registration_wins():
    registry = NodeRegistry()
    first = _file("src/a.js", name="first")
    second = _file("src/a.js", name="second")

    assert registry.register("src/a.js", first) is True
    assert registry.register("src/a.js", second) is False

    assert len(registry) == 1
    assert registry.lookup("src/a.js").name == "first"
    assert second.id == ""


def test_lookup_missing_returns_none():
    assert NodeRegistry().lookup("nope.js") is None


def test_ids_stay_unique_when_rng_repeats():
    """A seeded RNG that repeats itself must still not produce duplicate ids."""

    class _Repeating(random.Random):
        def __init__(self):
            super().__init__(0)
            self.calls = 0

        def choice(self, seq):
            self.calls += 1
            # first 18 draws produce the same id twice
            if self.calls <= 18:
                return seq[0]
            return super().choice(seq)

    registry = NodeRegistry(rng=_Repeating())
    a, b = _file("a.js"), _file("b.js")
    registry.register("a.js", a)
    registry.register("b.js", b)
    assert a.id != b.id


def test_all_preserves_insertion_order():
    registry = NodeRegistry()
    for path in ("z.js", "a.js", "m.js"):
        registry.register(path, _file(path))
    assert [n.path for n in registry.all()] == ["z.js", "a.js", "m.js"]


class TestFindByPath:
    """Exact and suffix-based lookup."""

    def test_exact_match(self):
        registry = NodeRegistry()
        node = _file("src/services/UserService.js")
        registry.register(node.path, node)
        assert registry.find_by_path("src/services/UserService.js") is node

    def test_suffix_match(self):
        registry = NodeRegistry()
        node = _file("src/services/UserService.js")
        registry.register(node.path, node)
        assert registry.find_by_path("services/UserService.js") is node

    def test_leading_dot_slash_is_ignored(self):
        registry = NodeRegistry()
        node = _file("src/services/UserService.js")
        registry.register(node.path, node)
        assert registry.find_by_path("./services/UserService.js") is node

    def test_ambiguous_suffix_returns_a_candidate(self):
        registry = NodeRegistry()
        a = _file("api/models/user.py")
        b = _file("worker/models/user.py")
        registry.register(a.path, a)
        registry.register(b.path, b)
        assert registry.find_by_path("models/user.py") in (a, b)

    def test_no_match(self):
        registry = NodeRegistry()
        registry.register("src/a.js", _file("src/a.js"))
        assert registry.find_by_path("b.js") is None
        assert registry.find_by_path("") is None


def test_add_keeps_existing_path_key():
    registry = NodeRegistry()
    file_node = _file("/health")
    registry.register("/health", file_node)
    endpoint = registry.add(Node(id="", name="/health", type=NodeType.ENDPOINT, path="/health"))

    assert endpoint.id and endpoint.id != file_node.id
    assert registry.lookup("/health") is file_node
    assert registry.find_endpoint("/health") is endpoint
    assert len(registry) == 2
