"""Base exception for Bundlescope."""

from typing import Any, Dict, Optional


class BundlescopeError(Exception):
    """Base exception for all Bundlescope errors.

    ``details`` holds the context shown after the message on the CLI, for
    example the offending path or chunk id.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
