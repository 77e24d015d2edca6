''' Tabulate upper quantiles of the Studentised maximum range distribution '''

from dataclasses import dataclass
import logging
import numpy as np
import yaml

from .quantile import smrange_quantile, XTOL
from .common import report
from .report.table import ReportQuantileTable


K_EXTENDED = (50, 100, 200, 500, 1000)


def k_grid(k_end):
    ''' Values of k for the table columns.

        k runs from 2 to k_end. When k_end > 100 the columns are
        2, ..., 20, 50, 100, 200, 500, 1000.
    '''
    if k_end < 2:
        raise ValueError(f'k_end must be >= 2, got {k_end}')
    if k_end <= 100:
        return list(range(2, k_end+1))
    return list(range(2, 21)) + list(K_EXTENDED)


def df_grid(index=1):
    ''' Degrees of freedom for the table rows. 0 means infinity.

        index=1: 1, ..., 20, 24, 30, 40, 60, 120, inf
        index=2: 1, ..., 40, 48, 60, 80, 120, 240, inf
    '''
    index = 1 if index == 1 else 2
    dfs = list(range(1, 20*index+1))
    dfs.extend(120*index//(5-i) for i in range(5))
    dfs.append(0)
    return dfs


@report.reporter(ReportQuantileTable)
@dataclass
class ResultsQuantileTable:
    ''' Computed quantile table

        Attributes:
            kvals (list): Number of treatments for each column
            dfvals (list): Degrees of freedom for each row (0 = infinite)
            quantiles (array): Upper quantiles, shape (len(dfvals), len(kvals))
            iterations (array): Probability evaluations used for each quantile
            converged (bool): All quantiles met the tolerances
            alpha (float): Upper-tail probability
            nrng (int): Number of independent ranges
            index (int): df grid selection (1 or 2)
    '''
    kvals: list
    dfvals: list
    quantiles: np.ndarray
    iterations: np.ndarray
    converged: bool
    alpha: float
    nrng: int
    index: int

    @property
    def maxiter(self):
        ''' Largest iteration count in the table '''
        return int(self.iterations.max()) if self.iterations.size else 0

    def quantile(self, k, df):
        ''' Get one table entry by k and df '''
        return self.quantiles[self.dfvals.index(df), self.kvals.index(k)]


class QuantileTable:
    ''' Table of upper quantiles q(k, df, nrng; alpha)

        Args:
            k_end (int): Last k column (see k_grid)
            alpha (float): Upper-tail probability
            index (int): 1 for df up to 20 plus 24..120, 2 for df up to 40 plus 48..240
            nrng (int): Number of independent ranges
            xtol (float): Tolerance on each quantile
    '''
    def __init__(self, k_end=10, alpha=0.05, index=1, nrng=1, xtol=XTOL):
        self.k_end = k_end
        self.alpha = alpha
        self.index = 1 if index == 1 else 2
        self.nrng = nrng
        self.xtol = xtol

    @property
    def kvals(self):
        return k_grid(self.k_end)

    @property
    def dfvals(self):
        return df_grid(self.index)

    def calculate(self):
        ''' Calculate every quantile in the table '''
        if not 0 < self.alpha < 1:
            raise ValueError(f'alpha must be in (0, 1), got {self.alpha}')
        kvals, dfvals = self.kvals, self.dfvals
        quantiles = np.zeros((len(dfvals), len(kvals)))
        iterations = np.zeros((len(dfvals), len(kvals)), dtype=int)
        converged = True
        ptol = self.alpha * self.xtol
        for i, df in enumerate(dfvals):
            for j, k in enumerate(kvals):
                result = smrange_quantile(1-self.alpha, k, df, self.nrng, self.xtol, ptol)
                quantiles[i, j] = result.x
                iterations[i, j] = result.iterations
                converged = converged and result.converged
        logging.info('Computed %d x %d quantile table, max iterations %d',
                     len(dfvals), len(kvals), iterations.max())
        return ResultsQuantileTable(kvals, dfvals, quantiles, iterations, converged,
                                    self.alpha, self.nrng, self.index)

    def get_config(self):
        ''' Get configuration dictionary '''
        return {'k_end': self.k_end,
                'alpha': self.alpha,
                'index': self.index,
                'nrng': self.nrng,
                'xtol': self.xtol}

    def load_config(self, config):
        ''' Load config into this table instance '''
        self.k_end = int(config.get('k_end', 10))
        self.alpha = float(config.get('alpha', 0.05))
        self.index = 1 if int(config.get('index', 1)) == 1 else 2
        self.nrng = int(config.get('nrng', 1))
        self.xtol = float(config.get('xtol', XTOL))

    @classmethod
    def from_config(cls, config):
        ''' Create new QuantileTable from configuration dictionary '''
        newtable = cls()
        newtable.load_config(config)
        return newtable

    @classmethod
    def from_configfile(cls, fname):
        ''' Load table setup from config file.

            Args:
                fname: File name or file object to read from

            Returns:
                QuantileTable instance loaded from config, or None if the
                file is not a valid setup.
        '''
        try:
            try:
                yml = fname.read()  # fname is file object
            except AttributeError:
                with open(fname, 'r', encoding='utf-8') as fobj:  # fname is string
                    yml = fobj.read()
        except UnicodeDecodeError:
            # file is binary, can't be read as yaml
            return None

        try:
            config = yaml.safe_load(yml)
        except yaml.YAMLError:
            return None  # Can't read YAML

        if not hasattr(config, 'get'):  # Something not right with file
            return None
        return cls.from_config(config)
