"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class ConfigurationError(DomainError):
    """Invalid configuration value from the environment or command line."""


def unknown_input_field(name: str) -> str:
    """Return message for an input field that does not exist."""
    return f"Unknown input field '{name}'"


def invalid_vat_rate(value: object) -> str:
    """Return message for a VAT rate outside the accepted range."""
    return f"Invalid VAT rate {value!r}: expected a number between 0 and 1"


def invalid_date_range(start: str, end: str) -> str:
    """Return message when the start date falls after the end date."""
    return f"Start date {start} is after end date {end}"
