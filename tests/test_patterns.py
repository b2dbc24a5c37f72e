"""Tests for route and DB-call heuristics."""

from graphscan.models import Edge, EdgeType, Node, NodeType
from graphscan.patterns import PatternDetector, RouteMatch, find_routes, has_db_operations
from graphscan.registry import NodeRegistry


def _source(registry: NodeRegistry, path: str) -> Node:
    node = Node(id="", name=path, type=NodeType.FILE, path=path)
    registry.register(path, node)
    return node


def test_find_routes_covers_call_styles():
    code = """
app.get('/api/users', handler);
router.POST("/api/orders", handler);
userRouter.delete('/api/users/:id', handler);
@Put('/api/items')
@patch("/api/items/:id")
"""
    routes = find_routes(code)
    assert RouteMatch("GET", "/api/users") in routes
    assert RouteMatch("POST", "/api/orders") in routes
    assert RouteMatch("DELETE", "/api/users/:id") in routes
    assert RouteMatch("PUT", "/api/items") in routes
    assert RouteMatch("PATCH", "/api/items/:id") in routes
    assert len(routes) == 5


def test_find_routes_ignores_other_verbs():
    assert find_routes("app.use('/static', serve); app.options('/x', h)") == []


def test_has_db_operations():
    assert has_db_operations("await User.findOne({ id })")
    assert has_db_operations("cursor.EXECUTE('select 1')")
    assert has_db_operations("db.users.updateMany({}, {})")
    assert not has_db_operations("const total = items.length;")


class TestPatternDetector:
    """Endpoint synthesis and dedup."""

    def test_creates_endpoint_and_edge(self):
        registry = NodeRegistry()
        edges = []
        source = _source(registry, "src/app.js")

        PatternDetector(registry, edges).detect("app.get('/health', h)", source)

        endpoint = registry.find_endpoint("/health")
        assert endpoint is not None
        assert endpoint.type is NodeType.ENDPOINT
        assert endpoint.path == "/health"
        assert edges == [Edge(source=source.id, target=endpoint.id, type=EdgeType.ENDPOINT_HANDLER)]

    def test_same_route_in_two_files_shares_one_endpoint(self):
        registry = NodeRegistry()
        edges = []
        a = _source(registry, "src/a.js")
        b = _source(registry, "src/b.js")
        detector = PatternDetector(registry, edges)

        detector.detect("app.get('/api/users', h)", a)
        detector.detect("app.get('/api/users', h)", b)

        endpoints = [n for n in registry.all() if n.type is NodeType.ENDPOINT]
        assert len(endpoints) == 1
        assert len(edges) == 2
        assert {e.source for e in edges} == {a.id, b.id}
        assert {e.target for e in edges} == {endpoints[0].id}

    def test_repeated_route_in_one_file_links_once(self):
        registry = NodeRegistry()
        edges = []
        source = _source(registry, "src/router.js")

        PatternDetector(registry, edges).detect(
            "router.get('/api/users', list);\nrouter.post('/api/users', create);", source
        )
        assert len(edges) == 1

    def test_sets_db_flag(self):
        registry = NodeRegistry()
        source = _source(registry, "src/repo.js")
        quiet = _source(registry, "src/math.js")
        detector = PatternDetector(registry, [])

        detector.detect("return Users.find({})", source)
        detector.detect("return a + b", quiet)

        assert source.has_db is True
        assert quiet.has_db is False
