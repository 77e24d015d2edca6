''' Distribution of the Studentised maximum range

    The maximum of nrng independent ranges of k normal variables, each
    divided by an independent estimate of the standard deviation with df
    degrees of freedom. The probability is integrated over s = sqrt(chi2(df)/df)
    with 40-node Gauss-Legendre quadrature:

        P(Q <= q) = C(df) * integral[ s**(df-1) exp(df/2*(1-s**2)) * P(R <= s*q)**nrng ds ]

    The limits of s come from empirical fits of the chi-square and maximum
    range distributions at probabilities of about 0.5E-13. When the upper
    limit of the maximum range cuts the s range, the integral is split in two
    and the upper piece (where P(R <= s*q) = 1) skips the range calculation.

    Accuracy is of order 1E-11 for k <= 1000 and nrng <= 100.

    References:
        Copenhaver, M. D. and B. Holland (1988). Computation of the distribution
        of the maximum Studentized range statistic with application to multiple
        significance testing of simple effects, J. Statist. Comput. Simul.,
        vol. 30, 1-15.
'''

import logging
import numpy as np

from .rangedist import range_cdf, KMAX_LIMIT
from .common.quadrature import GL40


NRNG_LIMIT = 100
LOG_SQRT_PI = 0.572364942924700087071713675676529356

_CHI2_UPPER_SMALL = (56.73, 61.26, 65.01, 68.38, 71.50)
_CHI2_LOWER_SMALL = (3.926e-27, 1.0e-13, 3.281e-09, 6.324e-07, 1.546e-05)


def range_upper(k, nrng):
    ''' Upper limit of the maximum of nrng ranges, upper probability ~0.5E-13 '''
    rn1 = 0.42*np.log(k - 0.5)**0.9 + 10.465
    if nrng <= 1:
        return float(rn1)
    rn100 = 0.2866*np.log(k - 0.9)**1.05 + 11.451
    return float(0.2273*(rn100 - rn1)*np.log(nrng)**0.97 + rn1)


def range_lower(k, nrng):
    ''' Lower limit of the maximum of nrng ranges, lower probability ~0.5E-13 '''
    if k <= 40:
        z1 = -27.12/np.log(k + 0.5)**2.1 + 1.8800
        if nrng <= 1:
            return float(np.exp(z1))
        z100 = -5.749/np.log(k)**0.12 + 6.4651
        dk = 2.934/(k + 1.0) + 0.522 if k < 8 else 0.86 - 0.0015*k
        bk = 7.88/(k + 2.0) + 0.112 if k < 8 else 16.875/(k + 10.0) - 0.0375
        x1 = 1.0/np.log(1.0 + dk)**bk
        x100 = 1.0/np.log(100.0 + dk)**bk
        x = 1.0/np.log(nrng + dk)**bk
        return float(np.exp((z100 - z1)/(x100 - x1)*(x - x1) + z1))

    z1 = 449.4*np.log(k + 10.0)**0.012 - 455.6678
    if nrng <= 1:
        return float(z1)
    z100 = 3.149*np.log(k + 1.0)**0.48 - 1.2017
    bk = -0.08478*np.log(k) + 0.5738 if k <= 55 else 0.03220*np.log(k) + 0.1050
    x1 = np.log(2.0)**bk
    x100 = np.log(101.0)**bk
    x = np.log(nrng + 1.0)**bk
    return float((z100 - z1)/(x100 - x1)*(x - x1) + z1)


def chi2_upper(df):
    ''' Upper limit of chi-square(df), upper probability ~0.5E-13 '''
    if df <= 5:
        return _CHI2_UPPER_SMALL[df-1]
    if df <= 20:
        w = 7.391 - 3.050/df + 5.208/(df*df)
    else:
        w = 7.441 - 5.209/df + 29.27/(df*df)
    d = 2.0/9.0/df
    return float(df*(w*np.sqrt(d) + (1.0 - d))**3)  # Wilson-Hilferty


def chi2_lower(df):
    ''' Lower limit of chi-square(df), lower probability ~0.5E-13 '''
    if df <= 5:
        return _CHI2_LOWER_SMALL[df-1]
    if df <= 20:
        w = -8.645 - 70.72/df + 77.47/(df*df)
        return float(df*np.exp(w/np.sqrt(0.5*df) - 1.0/df))
    w = -7.451 + 10.07/df + 82.83/(df*df)
    d = 2.0/9.0/df
    return float(df*(w*np.sqrt(d) + (1.0 - d))**3)  # Wilson-Hilferty


def chi_coef(df):
    ''' Normalizing constant of the density of s = sqrt(chi2(df)/df).

        Gamma(df/2) is accumulated as a sum of logs over df-2, df-4, ...
        so large df does not overflow.
    '''
    g = LOG_SQRT_PI if df % 2 == 1 else 0.0
    g += np.log(0.5*np.arange(df-2, 0, -2)).sum()
    return float(2.0*np.exp(0.5*df*(np.log(0.5*df) - 1.0) - g))


def smrange_cdf(q, k, df, nrng=1):
    ''' Lower-tail probability of the Studentised maximum range.

        Args:
            q (float): Studentised maximum range value
            k (int): Number of treatments in each range (>= 2)
            df (int): Error degrees of freedom. df <= 0 or inf means infinite.
              A fractional df is truncated to an integer.
            nrng (int): Number of independent ranges (>= 1)

        Returns:
            p (float): P(Q <= q)
    '''
    if k < 2:
        raise ValueError(f'Number of treatments k must be >= 2, got {k}')
    if nrng < 1:
        raise ValueError(f'Number of ranges must be >= 1, got {nrng}')
    if k > KMAX_LIMIT or nrng > NRNG_LIMIT:
        logging.debug('Studentised range accuracy not guaranteed for k=%s, nrng=%s', k, nrng)

    if q <= 0:
        return 0.0
    df = 0 if np.isinf(df) else int(df)
    if df <= 0:
        return range_cdf(q, k)**nrng

    sl = np.sqrt(chi2_lower(df)/df)
    su = np.sqrt(chi2_upper(df)/df)

    rlq = range_lower(k, nrng)/q
    if rlq >= su:
        return 0.0
    sl = max(sl, rlq)

    ruq = range_upper(k, nrng)/q
    if ruq <= sl:
        return 1.0

    def density(s):
        return np.exp((df - 1.0)*np.log(s) + 0.5*df*(1.0 - s*s))

    def integrand(s):
        prange = np.array([range_cdf(v, k) for v in s*q])
        return density(s) * prange**nrng

    p = 0.0
    if ruq < su:
        # Range probability is 1 above ru/q
        p += GL40.integrate(density, ruq, su)
        su = ruq
    p += GL40.integrate(integrand, sl, su)
    return float(chi_coef(df)*p)
