"""Shared test setup — runs before the application package is imported."""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="newsroom-tests-")

os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR}/newsroom.db"
os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["PAGE_SIZE"] = "6"
os.environ["SEARCH_PUBLISHED_ONLY"] = "false"
