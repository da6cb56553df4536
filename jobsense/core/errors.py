"""Programmer-facing errors.

These are raised synchronously and never reach the network. Runtime
failures of the webhook call are values (see ``WebhookFailure``), not
exceptions.
"""


class ConfigurationError(Exception):
    """A tool cannot be constructed from the available configuration."""


class InputValidationError(ValueError):
    """Tool input does not match the tool's schema.

    ``issues`` holds one ``(path, reason)`` pair per offending field.
    """

    def __init__(self, issues: list[tuple[str, str]]):
        self.issues = issues
        joined = ", ".join(f"{path}: {reason}" for path, reason in issues)
        super().__init__(f"Input validation failed: {joined}")
