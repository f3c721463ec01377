"""
Helper functions for conversions between discount factors and rates.
"""

import math

from curvelib.errors import DomainError


def df_to_zero_rate(df: float, time: float) -> float:
    """Convert discount factor to continuously compounded zero rate."""
    if df <= 0:
        raise DomainError(f"Discount factor must be positive, got {df}")
    if time == 0:
        raise DomainError("Zero rate is undefined at time 0")

    return -math.log(df) / time


def zero_rate_to_df(rate: float, time: float) -> float:
    """Convert continuously compounded zero rate to discount factor."""
    return math.exp(-rate * time)


def annualized_zero_rate_to_df(rate: float, time: float) -> float:
    """Convert annually compounded zero rate to discount factor."""
    if rate <= -1.0:
        raise DomainError(f"Annualized zero rate must exceed -100%, got {rate}")
    return (1.0 + rate) ** (-time)


def df_to_annualized_zero_rate(df: float, time: float) -> float:
    """Convert discount factor to annually compounded zero rate."""
    if df <= 0:
        raise DomainError(f"Discount factor must be positive, got {df}")
    if time == 0:
        raise DomainError("Zero rate is undefined at time 0")

    return df ** (-1.0 / time) - 1.0


def simple_to_continuous(rate: float, time: float) -> float:
    """Convert simple rate to continuously compounded rate."""
    if time < 0:
        raise DomainError(f"Time must be non-negative, got {time}")
    if time == 0:
        return rate
    growth = 1.0 + rate * time
    if growth <= 0:
        raise DomainError(f"Simple rate {rate} over {time} years gives a non-positive growth factor")

    return math.log(growth) / time


def continuous_to_simple(rate: float, time: float) -> float:
    """Convert continuously compounded rate to simple rate."""
    if time < 0:
        raise DomainError(f"Time must be non-negative, got {time}")
    if time == 0:
        return rate

    try:
        return (math.exp(rate * time) - 1.0) / time
    except OverflowError as exc:
        raise DomainError(f"Continuous rate {rate} over {time} years overflows") from exc
