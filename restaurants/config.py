import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
"""The tortoise URI of the backing store."""

test_database_url = os.getenv("TEST_DATABASE_URL", "sqlite://:memory:")
"""The tortoise URI of the store used by the test suite."""

port = int(os.getenv("PORT", "8080"))
"""The port to serve the api on."""

api_root = os.getenv("API_ROOT", "")
"""The base url for the api."""

sentry_dsn = os.getenv("SENTRY_DSN")
"""The sentry DSN to report exceptions to, if any."""
