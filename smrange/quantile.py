''' Quantiles of the Studentised maximum range distribution

    The root of smrange_cdf(x) = p is bracketed by doubling from x=2, then
    refined by alternating bisection and quadratic interpolation through the
    last three points (Muller's method). The bracket (x1, y1), (x2, y2)
    always satisfies y1 < p <= y2, and (x3, y3) is the most recently
    replaced end point used for the quadratic.

    References:
        Muller, D. E. (1956). A method for solving algebraic equations using an
        automatic computer, Mathematical Tables and Other Aids to Computation,
        vol. 10, 208-215.
'''

import logging
from typing import NamedTuple
import numpy as np

from .studentized import smrange_cdf


XTOL = 1E-8       # Default tolerance on the quantile
YEPS = 1E-12      # Resolution of the probability calculation
MAXITER = 200     # Rounds of bisection/interpolation after bracketing
SATURATE = 1E99   # Quantile returned for p >= 1


class QuantileResult(NamedTuple):
    ''' Quantile solution

        Attributes:
            x (float): Quantile value
            iterations (int): Number of probability evaluations
            converged (bool): Both tolerances were met
    '''
    x: float
    iterations: int
    converged: bool


def _interpolate(p, x1, y1, x2, y2, x3, y3, xtol):
    ''' Root of the quadratic through the three points, or None if it
        cannot be computed or falls outside [x1, x2].
    '''
    if abs(x1 - x3) < xtol or abs(x2 - x3) < xtol or x3 in (x1, x2):
        a = 0.0
    else:
        a = ((y3 - y1)/(x3 - x1) - (y2 - y1)/(x2 - x1)) / (x3 - x2)
    b = (y2 - y1)/(x2 - x1) - a*(x2 - x1)
    disc = b*b + 4.0*a*(p - y1)
    if disc < 0:
        return None

    if a > 0:
        x = x1 + (-b + np.sqrt(disc))/(2.0*a)
    else:
        denom = b + np.sqrt(disc)
        if denom == 0:
            return None
        x = x1 + 2.0*(p - y1)/denom

    if not x1 <= x <= x2:
        return None
    return float(x)


def smrange_quantile(p, k, df, nrng=1, xtol=XTOL, ptol=None):
    ''' Lower quantile of the Studentised maximum range distribution.

        Args:
            p (float): Lower-tail probability
            k (int): Number of treatments in each range
            df (int): Error degrees of freedom. df <= 0 means infinite.
            nrng (int): Number of independent ranges
            xtol (float): Tolerance on the width of the bracket
            ptol (float): Tolerance on the probability. Defaults to
              xtol*(1-p).

        Returns:
            QuantileResult (x, iterations, converged). x is 0 for p <= 0
            and 1E99 for p >= 1.
    '''
    if p <= 0:
        return QuantileResult(0.0, 0, True)
    if p >= 1:
        return QuantileResult(SATURATE, 0, True)
    if ptol is None:
        ptol = xtol * (1 - p)

    def cdf(x):
        return smrange_cdf(x, k, df, nrng)

    itr = 0
    x1, y1 = 0.0, 0.0
    x2 = 2.0
    y2 = cdf(x2)
    itr += 1
    while y2 < p:
        x1, y1 = x2, y2
        x2 *= 2.0
        y2 = cdf(x2)
        itr += 1
    x3, y3 = x2, y2

    converged = False
    for i in range(1, MAXITER+1):
        x = None
        if i % 2 == 0 and abs(y2 - y1) >= YEPS:
            x = _interpolate(p, x1, y1, x2, y2, x3, y3, xtol)
        if x is None:
            x = 0.5*(x1 + x2)

        y = cdf(x)
        itr += 1
        if abs(x2 - x1) < xtol and abs(y - p) < ptol:
            converged = True
            break

        if y >= p:
            x3, y3 = x2, y2
            x2, y2 = x, y
        else:
            x3, y3 = x1, y1
            x1, y1 = x, y

    if not converged:
        logging.warning('Studentised range quantile did not converge after %d iterations '
                        '(p=%s, k=%s, df=%s, nrng=%s)', itr, p, k, df, nrng)
    return QuantileResult(float(x), itr, converged)
