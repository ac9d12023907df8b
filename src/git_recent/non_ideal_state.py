"""Base type for non-ideal results of gateway and core operations.

Operations that can fail for expected, user-facing reasons return a
discriminated union such as ``CheckedOut | CheckoutFailed`` instead of
raising. Every failure variant derives from ``NonIdealState`` so callers can
narrow with a single ``isinstance`` check.
"""

from abc import ABC, abstractmethod


class NonIdealState(ABC):
    """Marker base class for expected failure results."""

    @property
    @abstractmethod
    def error_type(self) -> str:
        """Short machine-readable identifier, e.g. 'checkout-failed'."""
        ...

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description shown to the user."""
        ...
