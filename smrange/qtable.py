''' Functions for calculating Studentised range table values '''

import numpy as np

from .studentized import smrange_cdf
from .quantile import smrange_quantile, XTOL


DF_INTERP = 240  # Above this df, interpolate linearly in 1/df to infinity


def _degf(degf):
    ''' Convert degrees of freedom to the integer convention (0 = infinite).
        Fractional values are truncated, so 10.9 becomes 10.
    '''
    if not np.isfinite(degf):
        return 0
    return int(degf)


def critical_value(alpha, k, df, nrng=1, xtol=XTOL):
    ''' Upper quantile q(k, df, nrng; alpha) of the Studentised maximum range.

        Values for df > 240 are interpolated linearly in 1/df between the
        df=240 and infinite df quantiles.

        Args:
            alpha (float): Upper-tail probability (0-1)
            k (int): Number of treatments
            df (int): Error degrees of freedom. df <= 0 means infinite.
            nrng (int): Number of independent ranges
            xtol (float): Tolerance on the quantile

        Returns:
            q (float): Critical value
    '''
    if not 0 < alpha < 1:
        raise ValueError(f'alpha must be in (0, 1), got {alpha}')
    p = 1 - alpha
    ptol = alpha * xtol
    if df > DF_INTERP:
        q0 = smrange_quantile(p, k, 0, nrng, xtol, ptol).x
        q1 = smrange_quantile(p, k, DF_INTERP, nrng, xtol, ptol).x
        return (q1 - q0) * (DF_INTERP / df) + q0
    return smrange_quantile(p, k, df, nrng, xtol, ptol).x


def q_factor(conf, k, degf, nrng=1):
    ''' Return q given confidence (0-1) and degrees of freedom.

        Parameters
        ----------
        conf: float
            Level of confidence (0-1).
        k: int
            Number of treatments
        degf: float
            Degrees of freedom. May be inf. Fractional values are truncated.
        nrng: int
            Number of independent ranges

        Returns
        -------
        q: float
            Studentised maximum range critical value
    '''
    return critical_value(1-conf, k, _degf(degf), nrng)


def confidence(q, k, degf, nrng=1):
    ''' Get confidence value given q and degrees of freedom. Inverse of q_factor.

        Parameters
        ----------
        q: float
            Studentised maximum range value
        k: int
            Number of treatments
        degf: float
            Degrees of freedom. May be inf. Fractional values are truncated.
        nrng: int
            Number of independent ranges

        Returns
        -------
        conf: float
            Confidence value in the range (0-1).
    '''
    return smrange_cdf(q, k, _degf(degf), nrng)
