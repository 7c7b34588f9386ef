"""Root conftest — shared test configuration."""

import os

# Ensure tests don't pick up a developer's engine defaults
os.environ.pop("ITEM_LIST_DEFAULT_SEARCH_PROPERTIES", None)
os.environ.setdefault("ITEM_LIST_LOG_LEVEL", "DEBUG")
os.environ.setdefault("ITEM_LIST_LOG_FORMAT", "json")
