"""
Synthesis error hierarchy with categorization and user guidance.

Synthesis is a build-time step, so there is no retry behavior: each error
carries a category and a hint on how to fix the input that caused it.
"""


class SynthesisError(Exception):
    """
    Base error class for all synthesis-related exceptions.

    Provides categorization and user guidance for resolution.
    """

    def __init__(
        self,
        message: str,
        category: str,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize synthesis error.

        Args:
            message: Human-readable error description
            category: Error category (seed, configuration, schema, consistency)
            user_action: What user should do to resolve the issue
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.category = category
        self.user_action = user_action
        self.cause = cause

    def __str__(self) -> str:
        """Enhanced string representation with user guidance."""
        base_msg = super().__str__()
        if self.user_action:
            return f"{base_msg}\nAction required: {self.user_action}"
        return base_msg


class SeedValidationError(SynthesisError):
    """A seed identity value is malformed."""

    def __init__(
        self, message: str, field: str | None = None, user_action: str | None = None
    ):
        action = user_action or "Correct the seed value in the environment"
        if field:
            message = f"Validation error in field '{field}': {message}"
        super().__init__(message=message, category="seed", user_action=action)
        self.field = field


class ConfigurationError(SynthesisError):
    """Settings could not be loaded or combined."""

    def __init__(
        self,
        message: str,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(
            message=message,
            category="configuration",
            user_action=user_action or "Review and correct configuration",
            cause=cause,
        )


class SchemaError(SynthesisError):
    """A built resource does not satisfy the target resource schema."""

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        cause: Exception | None = None,
    ):
        if kind:
            message = f"{kind}: {message}"
        super().__init__(
            message=message,
            category="schema",
            user_action="Check the builder producing this resource",
            cause=cause,
        )
        self.kind = kind


class ConsistencyError(SynthesisError):
    """Two resources disagree on a value that must be shared."""

    def __init__(self, message: str, field: str | None = None):
        if field:
            message = f"Inconsistent reference '{field}': {message}"
        super().__init__(
            message=message,
            category="consistency",
            user_action="Derive the value from the resolved identity",
        )
        self.field = field
