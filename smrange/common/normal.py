''' Standard normal tail probabilities

    Thin wrappers around scipy.special giving full relative precision in
    both tails, plus the probability of an interval (a, b] computed without
    subtracting two CDF values that are both close to 0 or 1.
'''

import numpy as np
from scipy.special import ndtr, erf


BORDER = 3.7  # Switch to one-sided tails beyond this |u|

_MODES = {'upper': 'upper', 1: 'upper',
          'lower': 'lower', 0: 'lower',
          'central': 'central', 2: 'central'}


def normal_tail(u, mode='upper'):
    ''' Tail probability of the standard normal distribution.

        Args:
            u (float or array): Standard normal value
            mode (str or int): Which probability to return:
                'upper' (or 1): P(Z > u)
                'lower' (or 0): P(Z <= u)
                'central' (or 2): P(0 < Z <= u), negative for u < 0

        Returns:
            p (float or array): Probability
    '''
    try:
        mode = _MODES[mode]
    except (KeyError, TypeError):
        raise ValueError(f'Unknown normal tail mode {mode}')

    if mode == 'upper':
        return ndtr(np.negative(u))
    elif mode == 'lower':
        return ndtr(u)
    return 0.5 * erf(np.asarray(u) / np.sqrt(2))


def interval_probability(a, b):
    ''' Probability that a standard normal falls in the interval (a, b].

        Both tails are handled with the one-sided probabilities so small
        interval probabilities keep their relative precision.

        Args:
            a (float or array): Lower end of interval
            b (float or array): Upper end of interval

        Returns:
            p (float or array): P(a < Z <= b), zero where a >= b
    '''
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    p = np.where(a > BORDER,
                 normal_tail(a, 'upper') - normal_tail(b, 'upper'),
                 np.where(b < -BORDER,
                          normal_tail(b, 'lower') - normal_tail(a, 'lower'),
                          normal_tail(b, 'central') - normal_tail(a, 'central')))
    p = np.where(a >= b, 0.0, p)
    if p.ndim == 0:
        return float(p)
    return p
