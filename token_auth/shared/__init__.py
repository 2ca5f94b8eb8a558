"""
Shared utilities for token-auth.

- config: settings via pydantic-settings
- logging: structured logging with request correlation
- errors: canonical error types and responses
- lifecycle: environment lookup and graceful shutdown for hosting processes

Nothing in here imports from the token packages.
"""
