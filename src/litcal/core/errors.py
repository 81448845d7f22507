from __future__ import annotations


class LitcalError(Exception):
    """Base error."""


class InvalidYearRange(LitcalError, ValueError):
    """Raised when a civil year falls outside the Gregorian Computus domain."""

    def __init__(self, year: int, min_year: int, max_year: int):
        self.year = year
        self.min_year = min_year
        self.max_year = max_year
        super().__init__(f"Year {year} is outside the supported range [{min_year}, {max_year}]")


class AmbiguousAnchor(LitcalError):
    """Raised at configuration time for an unknown Epiphany-Sunday convention."""


class UnknownTradition(LitcalError, KeyError):
    """Raised when a tradition name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownDatePattern(LitcalError, KeyError):
    """Raised when a date pattern key cannot be resolved."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
