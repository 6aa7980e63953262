"""Domain-specific errors.

Advisors never raise for expected outcomes: unknown keys map to ``None``
or to a fallback record. Exceptions here signal broken static data.
"""


class DishmateError(Exception):
    """Base exception for all Dishmate errors."""

    pass


class ReferenceDataError(DishmateError):
    """Raised when static reference data is inconsistent (e.g., a dangling node id)."""

    pass
