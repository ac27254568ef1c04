"""Test configuration and fixtures."""

import os

# Settings are read from the environment when containers are built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-for-the-askit-suite-0123456789")

import logfire  # noqa: E402

# Logfire must be configured before the app module is imported
logfire.configure(send_to_logfire=False, console=False)
