from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class InvalidInputError(DomainError):
    """Caller parameters are invalid."""


class NoDataAvailableError(DomainError):
    """The call was valid but produced nothing that can be analyzed."""


class CapabilityUnsupportedError(DomainError):
    """A venue does not offer the requested operation."""

    def __init__(self, venue: str, operation: str):
        super().__init__(f"{venue} does not support {operation}.")
        self.venue = venue
        self.operation = operation


class UpstreamFailureError(DomainError):
    """Network or decoding failure from a venue."""

    def __init__(self, venue: str, operation: str, message: str):
        super().__init__(f"{venue}.{operation} failed: {message}")
        self.venue = venue
        self.operation = operation


class AggregationPartialFailureError(DomainError):
    """One or more venues failed during a multi-venue operation."""

    def __init__(self, failures: list[DomainError]):
        detail = "; ".join(str(item) for item in failures)
        super().__init__(f"{len(failures)} venue(s) failed: {detail}")
        self.failures = failures
