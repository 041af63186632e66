"""Least-squares straight-line fit and its coefficient of determination."""

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class RegressionResult:
    """The fitted line ``y = intercept + slope * x`` with its working sums."""

    intercept: float
    slope: float
    r_squared: float
    count: int
    sum_x: float
    sum_y: float
    sum_xy: float
    sum_xx: float
    explained: float
    total: float


def fit_line(xs: Sequence[float], ys: Sequence[float]) -> RegressionResult:
    """Fit a line to the points by solving the two normal equations.

    ``r_squared`` is the explained sum of squares over the total sum of squares;
    it is NaN when every ``y`` is the same.
    """
    if len(xs) != len(ys):
        raise ValueError(f"got {len(xs)} x values but {len(ys)} y values")
    if not xs:
        raise ValueError("at least one point is needed")
    count = len(xs)
    sum_x = float(sum(xs))
    sum_y = float(sum(ys))
    sum_xy = float(sum(x * y for x, y in zip(xs, ys)))
    sum_xx = float(sum(x * x for x in xs))

    denominator = sum_x * sum_x - sum_xx * count
    if denominator == 0:
        raise ValueError("the x values must not all be equal")
    slope = (sum_x * sum_y - count * sum_xy) / denominator
    intercept = (sum_y - sum_x * slope) / count

    y_mean = sum_y / count
    total = sum((y - y_mean) ** 2 for y in ys)
    explained = sum((intercept + slope * x - y_mean) ** 2 for x in xs)
    r_squared = explained / total if total else math.nan

    return RegressionResult(
        intercept=intercept,
        slope=slope,
        r_squared=r_squared,
        count=count,
        sum_x=sum_x,
        sum_y=sum_y,
        sum_xy=sum_xy,
        sum_xx=sum_xx,
        explained=explained,
        total=total,
    )