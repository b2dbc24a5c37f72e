"""Demo graph of a small web backend, covering most node and edge types."""

from __future__ import annotations

from .models import Graph

_NODES = [
    ("1", "app.js", "file", "src/app.js"),
    ("2", "server.js", "file", "src/server.js"),
    ("3", "index.js", "file", "src/index.js"),
    ("4", "userRouter.js", "router", "src/routes/userRouter.js"),
    ("5", "productRouter.js", "router", "src/routes/productRouter.js"),
    ("6", "orderRouter.js", "router", "src/routes/orderRouter.js"),
    ("7", "authRouter.js", "router", "src/routes/authRouter.js"),
    ("8", "/api/users", "endpoint", "/api/users"),
    ("9", "/api/products", "endpoint", "/api/products"),
    ("10", "/api/orders", "endpoint", "/api/orders"),
    ("11", "/api/auth/login", "endpoint", "/api/auth/login"),
    ("12", "/api/auth/register", "endpoint", "/api/auth/register"),
    ("13", "UserService", "service", "src/services/UserService.js"),
    ("14", "ProductService", "service", "src/services/ProductService.js"),
    ("15", "OrderService", "service", "src/services/OrderService.js"),
    ("16", "AuthService", "service", "src/services/AuthService.js"),
    ("17", "EmailService", "service", "src/services/EmailService.js"),
    ("18", "users", "collection", "db/users"),
    ("19", "products", "collection", "db/products"),
    ("20", "orders", "collection", "db/orders"),
    ("21", "sessions", "collection", "db/sessions"),
    ("22", "logger.js", "utility", "src/utils/logger.js"),
    ("23", "validator.js", "utility", "src/utils/validator.js"),
    ("24", "helpers.js", "utility", "src/utils/helpers.js"),
    ("25", "migrate.py", "script", "scripts/migrate.py"),
    ("26", "seed.py", "script", "scripts/seed.py"),
    ("27", "user_cache", "cache_key", "cache:users"),
    ("28", "product_cache", "cache_key", "cache:products"),
    ("29", "sendEmails", "task", "tasks/sendEmails.js"),
    ("30", "processOrders", "task", "tasks/processOrders.js"),
    ("31", "stripeWebhook", "webhook", "webhooks/stripe.js"),
    ("32", "githubWebhook", "webhook", "webhooks/github.js"),
    ("33", "userCreated", "event", "events/userCreated"),
    ("34", "orderPlaced", "event", "events/orderPlaced"),
    ("35", "StripeAPI", "external_api", "https://api.stripe.com"),
    ("36", "SendGridAPI", "external_api", "https://api.sendgrid.com"),
    ("37", "middleware.js", "file", "src/middleware.js"),
    ("38", "config.js", "file", "src/config.js"),
    ("39", "database.js", "file", "src/database.js"),
    ("40", "redis.js", "file", "src/redis.js"),
]

_EDGES = [
    # app structure
    ("3", "1", "import"), ("1", "2", "import"), ("1", "37", "import"), ("1", "38", "import"),
    ("1", "4", "import"), ("1", "5", "import"), ("1", "6", "import"), ("1", "7", "import"),
    # routers
    ("4", "8", "endpoint_handler"), ("5", "9", "endpoint_handler"),
    ("6", "10", "endpoint_handler"), ("7", "11", "endpoint_handler"),
    ("7", "12", "endpoint_handler"),
    ("4", "13", "import"), ("5", "14", "import"), ("6", "15", "import"), ("7", "16", "import"),
    # services
    ("13", "18", "db_read"), ("13", "18", "db_write"),
    ("14", "19", "db_read"), ("14", "19", "db_write"),
    ("15", "20", "db_read"), ("15", "20", "db_write"),
    ("16", "21", "db_read"), ("16", "21", "db_write"),
    ("13", "27", "cache_read"), ("13", "27", "cache_write"),
    ("14", "28", "cache_read"), ("14", "28", "cache_write"),
    ("13", "22", "import"), ("13", "23", "import"), ("14", "22", "import"),
    ("15", "23", "import"), ("16", "24", "import"),
    ("17", "36", "api_call"), ("29", "17", "import"),
    ("30", "15", "import"), ("30", "35", "api_call"),
    # webhooks and events
    ("31", "15", "webhook_receive"), ("31", "35", "api_call"), ("32", "26", "webhook_receive"),
    ("13", "33", "event_publish"), ("15", "34", "event_publish"),
    ("33", "17", "import"), ("34", "30", "import"),
    # scripts and storage
    ("25", "18", "db_write"), ("25", "19", "db_write"),
    ("26", "18", "db_write"), ("26", "19", "db_write"), ("26", "20", "db_write"),
    ("39", "18", "db_read"), ("39", "19", "db_read"), ("39", "20", "db_read"),
    ("40", "27", "cache_read"), ("40", "28", "cache_read"),
]


def sample_graph() -> Graph:
    return Graph.from_dict({
        "nodes": [
            {"id": i, "name": name, "type": kind, "path": path}
            for i, name, kind, path in _NODES
        ],
        "edges": [
            {"source": s, "target": t, "type": kind}
            for s, t, kind in _EDGES
        ],
    })
