''' Distribution of the range of k independent standard normal variables

    P(range <= r) is computed with Hartley's formula: a closed-form first term
    (2*Phi(r/2) - 1)**k plus a second term integrated with 20-node
    Gauss-Legendre quadrature from r/2 up to an empirical limit beyond which
    the integrand is negligible (about 1E-13).

    Accuracy is of order 1E-12 for k <= 1000.

    References:
        H. O. Hartley (1942). Biometrika, 32, 309-310.
'''

import numpy as np

from .common.normal import normal_tail, interval_probability
from .common.quadrature import GL20


KMAX_LIMIT = 1000  # Empirical limits are fit up to this k
INV_SQRT_2PI = 0.398942280401432677939946059934381868


def _check_k(k):
    if k < 2:
        raise ValueError(f'Number of treatments k must be >= 2, got {k}')


def upper_limit(r, k):
    ''' Upper integration limit for the second term of Hartley's formula.

        Empirical fit of the x beyond which the integrand contributes less
        than about 1E-13. Values of k above 1000 use the k=1000 limit.

        Args:
            r (float): Range value
            k (int): Number of treatments

        Returns:
            xu (float): Upper limit, or 0 when r is small enough that the
              second term vanishes
    '''
    k = min(k, KMAX_LIMIT)

    # Limit at r=13
    ulim13 = 1.403*np.sqrt(np.log(k) + 28.127)

    w = np.log(k)
    rmin = np.exp(2.3641 - 4.669/w - 9.499/(w*w) - 13.293/(w*w*w))
    if r <= rmin:
        return 0.0

    if k <= 10:
        d1 = 0.02173*np.log(8.7/(k - 1.3))
        d2 = 8.4 + 0.2*k
        z = min(1.0, max(0.0, d1*(d2 - r)) + 0.199 + 0.134*r - 0.00500*r*r)
    else:
        rmin10 = 0.07856
        a1 = 8.889*np.log(k - 3.0) + 24.70 if k < 30 else 54.0
        a2 = 0.06873*np.log(k - 7.0) + 0.9245 if k < 30 else 1.14
        if k < 22:
            a3 = -0.6031*np.log(k + 6.0) + 1.6877
        elif k <= 35:
            a3 = -0.31
        else:
            a3 = 0.308*np.log(k - 5.0) - 1.3576
        w = a1*((r - rmin + rmin10)/(42.0 - rmin + rmin10))**a2 + a3
        z = 1.0 if w > 9.0 else 0.199 + 0.134*w - 0.00500*w*w
    return float(ulim13*z)


def range_cdf(r, k):
    ''' Lower-tail probability of the range of k standard normal variables.

        Args:
            r (float): Range value
            k (int): Number of treatments (>= 2)

        Returns:
            p (float): P(range <= r)
    '''
    _check_k(k)
    if r <= 0:
        return 0.0

    if k == 2:
        # Range of two normals is sqrt(2)*|Z|
        return float(2.0*normal_tail(r/np.sqrt(2.0), 'central'))

    p = 0.0
    xu = upper_limit(r, k)
    if xu > 0.5*r:
        def integrand(x):
            return np.exp(-0.5*x*x) * interval_probability(x - r, x)**(k - 1)
        p = 2.0*k*INV_SQRT_2PI * GL20.integrate(integrand, 0.5*r, xu)

    p += (2.0*normal_tail(0.5*r, 'central'))**k
    return float(p)
