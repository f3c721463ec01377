"""Analytics built on discount curves."""

from .annuity import swap_annuity

__all__ = ["swap_annuity"]
