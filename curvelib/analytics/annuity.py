"""Swap annuity from a discount curve."""

import logging
from typing import Optional, Sequence, Union

from curvelib.curves import CurveModel, DiscountCurve
from curvelib.errors import ConstructionError
from curvelib.tenor import TimeDiscretization

logger = logging.getLogger(__name__)


def swap_annuity(
    tenor: Union[TimeDiscretization, Sequence[float]],
    discount_curve: Union[DiscountCurve, str],
    model: Optional[CurveModel] = None,
    evaluation_time: Optional[float] = None,
) -> float:
    """Sum of discounted period lengths over a tenor.

    A(t) = sum_i dt_i * df(t_{i+1}) / df(t), paying at the end of each period.

    Args:
        tenor: Period boundaries t_0 < ... < t_n
        discount_curve: Curve, or the name of a discount curve in ``model``
        model: Curve model passed to discount factor queries
        evaluation_time: Time the annuity is valued at; defaults to t_0

    Returns:
        Annuity in units of the evaluation-time numeraire
    """
    if not isinstance(tenor, TimeDiscretization):
        tenor = TimeDiscretization(tenor)
    if isinstance(discount_curve, str):
        if model is None:
            raise ConstructionError(
                f"Discount curve {discount_curve!r} given by name but no model supplied"
            )
        discount_curve = model.get_discount_curve(discount_curve)
    if evaluation_time is None:
        evaluation_time = tenor.get_time(0)

    annuity = 0.0
    for i in range(tenor.number_of_time_steps):
        payment_time = tenor.get_time(i + 1)
        annuity += tenor.get_time_step(i) * discount_curve.get_discount_factor(payment_time, model)

    annuity /= discount_curve.get_discount_factor(evaluation_time, model)
    logger.debug(
        "Annuity over %s periods on %s: %.10f", tenor.number_of_time_steps, discount_curve.name, annuity
    )
    return annuity
