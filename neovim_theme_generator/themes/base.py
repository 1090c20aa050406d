from abc import ABC, abstractmethod


class Theme(ABC):
    """Resolves every semantic role to a concrete Color.

    Implementations must be total over Category, Token and DiagnosticLevel,
    and return the same color for the same role every time they are asked.
    """

    @abstractmethod
    def category_color(self, category):
        """Return the Color for a Category."""

    @abstractmethod
    def token_color(self, token):
        """Return the Color for a Token."""

    @abstractmethod
    def diagnostic_level_color(self, level):
        """Return the Color for a DiagnosticLevel."""
