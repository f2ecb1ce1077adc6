"""Exception hierarchy for OpenIBAN.

All exceptions carry structured context for logging. The validation path
(``IBAN`` predicates) never raises; these are used at the builder boundary,
inside the checksum functions and by the German rule engine.

Usage:
    from openiban.exceptions import ArgumentError, UnsupportedAccountDetails

    try:
        iban = build(country_code="DE", bank_code="10020500", account_number="1")
    except UnsupportedAccountDetails as e:
        logger.warning("account_not_transactable", context=e.context)
"""

from __future__ import annotations

from typing import Any


class OpenIBANError(Exception):
    """Base exception for all OpenIBAN errors.

    Attributes:
        message: Human-readable error message
        context: Additional context for debugging (dict)
        original_error: Original exception if wrapped
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})
        self.original_error = original_error

    def __str__(self) -> str:
        """Format exception with context for logging."""
        base = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        if self.original_error:
            base = f"{base} [caused by: {type(self.original_error).__name__}]"
        return base

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# =============================================================================
# Input Errors
# =============================================================================


class ArgumentError(OpenIBANError, ValueError):
    """Raised when builder input is missing or malformed."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)[:100]
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class UnsupportedCountryError(ArgumentError):
    """Raised when an IBAN cannot be built for the given country code."""

    def __init__(self, country_code: str | None, **kwargs: Any) -> None:
        message = f"Don't know how to build an IBAN for country code {country_code}"
        super().__init__(message, field="country_code", value=country_code, **kwargs)
        self.country_code = country_code


class BicNotFoundError(OpenIBANError):
    """Raised when a bank code is required and the BIC finder returns nothing."""

    def __init__(
        self,
        country_code: str,
        national_id: str | None,
        **kwargs: Any,
    ) -> None:
        message = f"No BIC found for {country_code} branch code {national_id}"
        context = dict(kwargs.pop("context", None) or {})
        context.update({"country_code": country_code, "national_id": national_id})
        super().__init__(message, context=context, **kwargs)


# =============================================================================
# Checksum & Domain Errors
# =============================================================================


class InvalidCharacterError(OpenIBANError, ValueError):
    """Raised by a checksum function fed a character outside its alphabet."""

    def __init__(self, message: str, *, character: str | None = None, **kwargs: Any) -> None:
        context = dict(kwargs.pop("context", None) or {})
        if character is not None:
            context["character"] = character
        super().__init__(message, context=context, **kwargs)
        self.character = character


class UnsupportedAccountDetails(OpenIBANError):
    """Raised when German details are parseable but flagged as non-transactable."""

    def __init__(
        self,
        message: str,
        *,
        bank_code: str | None = None,
        rule: str | None = None,
        **kwargs: Any,
    ) -> None:
        context = dict(kwargs.pop("context", None) or {})
        if bank_code:
            context["bank_code"] = bank_code
        if rule:
            context["rule"] = rule
        super().__init__(message, context=context, **kwargs)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(OpenIBANError):
    """Raised when a static data file is missing or malformed."""

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        path: str | None = None,
        **kwargs: Any,
    ) -> None:
        context = dict(kwargs.pop("context", None) or {})
        if setting:
            context["setting"] = setting
        if path:
            context["path"] = path
        super().__init__(message, context=context, **kwargs)
