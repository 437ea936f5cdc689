from __future__ import annotations

"""
Nonlinear conjugate gradient minimizer (Polack-Ribiere directions, line search
with quadratic/cubic interpolation and the Wolfe-Powell stopping criteria).

Follows Carl Edward Rasmussen's fmincg as used in the Stanford ML course:

    (C) Copyright 1999, 2000 & 2001, Carl Edward Rasmussen
    Permission is granted for anyone to copy, use, or modify these
    programs and accompanying documents for purposes of research or
    education, provided this copyright notice is retained, and note is
    made of any changes that have been made.

Changes: operates on numpy vectors, never mutates the caller's starting point,
reports progress through logging and accepts an optional stop hook.
"""

import logging
import math
import sys
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from .log import get_logger

logger = get_logger(__name__)

CostGradFn = Callable[[np.ndarray], "tuple[float, np.ndarray]"]

# extrapolate at most 3 times the current bracket
EXT = 3.0
# RHO and SIG are the constants in the Wolfe-Powell conditions
RHO = 0.01
SIG = 0.5
# don't reevaluate within 0.1 of the limit of the current bracket
INT = 0.1
# max 20 function evaluations per line search
MAX = 20
# maximum allowed slope ratio
RATIO = 100.0

REALMIN = sys.float_info.min


@dataclass
class MinimizeResult:
    theta: np.ndarray
    costs: list[float] = field(default_factory=list)
    iterations: int = 0


def _finite(x: float) -> bool:
    return not (math.isnan(x) or math.isinf(x))


def _sqrt(x: float) -> float:
    # negative discriminant means no real root; callers fall back to bisection
    return math.sqrt(x) if x >= 0 else math.nan


def _div(num: float, den: float) -> float:
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def minimize_cg(
    cost_grad_fn: CostGradFn,
    theta,
    maxiter: int,
    verbose: bool = False,
    should_stop: Callable[[], bool] | None = None,
) -> MinimizeResult:
    """
    Minimize `cost_grad_fn` starting from `theta`.

    A positive `maxiter` bounds the number of line searches, a negative one
    bounds the number of function evaluations by abs(maxiter). Running out of
    budget or two line searches failing in a row ends the run; neither is an
    error. The returned costs hold the value reached after every successful
    line search.
    """
    X = np.array(theta, dtype=float)
    costs: list[float] = []
    length = abs(maxiter)

    if maxiter == 0:
        return MinimizeResult(X, costs, 0)

    i = 0
    red = 1.0
    ls_failed = False

    f1, df1 = cost_grad_fn(X.copy())
    f1 = float(f1)
    df1 = np.asarray(df1, dtype=float)
    i += 1 if maxiter < 0 else 0

    s = -df1
    d1 = -float(s @ s)
    z1 = red / (1.0 - d1)

    while i < length:
        if should_stop is not None and should_stop():
            logger.debug("Stop requested after %d iteration(s)", i)
            break
        i += 1 if maxiter > 0 else 0

        X0, f0, df0 = X.copy(), f1, df1.copy()

        X = X + z1 * s
        f2, df2 = cost_grad_fn(X.copy())
        f2 = float(f2)
        df2 = np.asarray(df2, dtype=float)
        i += 1 if maxiter < 0 else 0
        d2 = float(df2 @ s)

        # point 3 starts equal to point 1
        f3, d3, z3 = f1, d1, -z1
        M = MAX if maxiter > 0 else min(MAX, -maxiter - i)
        success = False
        limit = -1.0

        while True:
            while (f2 > f1 + z1 * RHO * d1 or d2 > -SIG * d1) and M > 0:
                # tighten the bracket
                limit = z1
                if f2 > f1:
                    # quadratic fit
                    z2 = z3 - _div(0.5 * d3 * z3 * z3, d3 * z3 + f2 - f3)
                else:
                    # cubic fit
                    A = _div(6.0 * (f2 - f3), z3) + 3.0 * (d2 + d3)
                    B = 3.0 * (f3 - f2) - z3 * (d3 + 2.0 * d2)
                    z2 = _div(_sqrt(B * B - A * d2 * z3 * z3) - B, A)
                if not _finite(z2):
                    z2 = z3 / 2.0
                # don't accept too close to the limits
                z2 = max(min(z2, INT * z3), (1.0 - INT) * z3)
                z1 += z2
                X = X + z2 * s
                f2, df2 = cost_grad_fn(X.copy())
                f2 = float(f2)
                df2 = np.asarray(df2, dtype=float)
                M -= 1
                i += 1 if maxiter < 0 else 0
                d2 = float(df2 @ s)
                # z3 is now relative to the location of z2
                z3 -= z2

            if f2 > f1 + z1 * RHO * d1 or d2 > -SIG * d1:
                break  # failure
            elif d2 > SIG * d1:
                success = True
                break
            elif M == 0:
                break  # failure

            # cubic extrapolation
            A = _div(6.0 * (f2 - f3), z3) + 3.0 * (d2 + d3)
            B = 3.0 * (f3 - f2) - z3 * (d3 + 2.0 * d2)
            z2 = _div(-d2 * z3 * z3, B + _sqrt(B * B - A * d2 * z3 * z3))
            if not _finite(z2) or z2 < 0:
                if limit < -0.5:
                    # no upper limit, extrapolate the maximum amount
                    z2 = z1 * (EXT - 1.0)
                else:
                    z2 = (limit - z1) / 2.0
            elif limit > -0.5 and z2 + z1 > limit:
                # beyond the bracket, bisect
                z2 = (limit - z1) / 2.0
            elif limit < -0.5 and z2 + z1 > z1 * EXT:
                z2 = z1 * (EXT - 1.0)
            elif z2 < -z3 * INT:
                z2 = -z3 * INT
            elif limit > -0.5 and z2 < (limit - z1) * (1.0 - INT):
                # too close to the limit
                z2 = (limit - z1) * (1.0 - INT)

            # point 3 becomes point 2
            f3, d3, z3 = f2, d2, -z2
            z1 += z2
            X = X + z2 * s
            f2, df2 = cost_grad_fn(X.copy())
            f2 = float(f2)
            df2 = np.asarray(df2, dtype=float)
            M -= 1
            i += 1 if maxiter < 0 else 0
            d2 = float(df2 @ s)

        if success:
            f1 = f2
            costs.append(f1)
            logger.log(
                logging.INFO if verbose else logging.DEBUG,
                "Iteration %d | Cost: %e",
                i,
                f1,
            )
            # Polack-Ribiere direction
            s = _div(float(df2 @ df2) - float(df1 @ df2), float(df1 @ df1)) * s - df2
            df1, df2 = df2, df1
            d2 = float(df1 @ s)
            if d2 > 0:
                # new slope must be negative, otherwise use steepest direction
                s = -df1
                d2 = -float(s @ s)
            z1 *= min(RATIO, _div(d1, d2 - REALMIN))
            d1 = d2
            ls_failed = False
        else:
            # restore the point from before the failed line search
            X, f1, df1 = X0, f0, df0
            if ls_failed or i > length:
                break
            df1, df2 = df2, df1
            s = -df1
            d1 = -float(s @ s)
            z1 = 1.0 / (1.0 - d1)
            ls_failed = True

    return MinimizeResult(X, costs, i)


def fmincg(
    cost_grad_fn: CostGradFn,
    theta,
    maxiter: int,
    verbose: bool = False,
) -> np.ndarray:
    """Return only the parameter vector found by `minimize_cg`."""
    return minimize_cg(cost_grad_fn, theta, maxiter, verbose=verbose).theta
