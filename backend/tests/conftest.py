"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real cluster by accident
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/eventhub_test")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
