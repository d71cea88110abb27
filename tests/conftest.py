"""Root conftest — shared test configuration."""

import os

# Never let a test run touch a real users.json in the working directory
os.environ.setdefault("USERS_FILE", os.path.join("/tmp", "users-api-test.json"))
os.environ.setdefault("LOG_FORMAT", "text")
