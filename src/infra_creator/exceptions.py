"""Custom exception hierarchy for infra-creator.

All exceptions that cross layer boundaries must inherit from
:class:`InfraCreatorError`.  Raw third-party exceptions (e.g. the
``EOFError`` prompt_toolkit raises on Ctrl+D) must not propagate beyond
the prompt layer; they are re-raised as a typed subclass defined here.

Hierarchy
---------
InfraCreatorError
├── InputClosedError
├── InvalidSelectionError
├── SettingsValidationError
├── ProvisioningNotImplementedError
└── EnvironmentError
"""

from __future__ import annotations


class InfraCreatorError(Exception):
    """Base exception for all infra-creator errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Interactive input -----------------------------------------------------

class InputClosedError(InfraCreatorError):
    """Raised when the terminal reaches end-of-input or a prompt is cancelled.

    The navigator treats this as an implicit ``exit`` selection.
    """


class InvalidSelectionError(InfraCreatorError):
    """Raised when a selection falls outside its closed choice set."""


# --- Settings --------------------------------------------------------------

class SettingsValidationError(InfraCreatorError):
    """Raised when a settings field fails validation."""


# --- Provisioning ----------------------------------------------------------

class ProvisioningNotImplementedError(InfraCreatorError):
    """Raised by the placeholder backend for every provisioning request."""

    def __init__(self, resource_type: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"Infrastructure creation for {resource_type} not yet implemented.",
            hint=hint,
        )
        self.resource_type: str = resource_type


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(InfraCreatorError):
    """Raised when a required runtime dependency is not available."""
