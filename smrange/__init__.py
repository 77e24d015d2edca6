'''
smrange - Studentised maximum range distribution

Lower-tail probabilities and quantiles of the range of k normal variables,
and of the maximum of several independent Studentised ranges, as used in
Tukey-type multiple comparison procedures.
'''

from .version import __version__, __date__

from .common.normal import normal_tail, interval_probability
from .rangedist import range_cdf
from .studentized import smrange_cdf
from .quantile import smrange_quantile, QuantileResult
from .qtable import critical_value, q_factor, confidence
from .table import QuantileTable

__all__ = ['__version__', '__date__', 'normal_tail', 'interval_probability', 'range_cdf',
           'smrange_cdf', 'smrange_quantile', 'QuantileResult', 'critical_value', 'q_factor',
           'confidence', 'QuantileTable']
