''' Report a table of Studentised maximum range quantiles '''

from ..common import report


class ReportQuantileTable:
    ''' Report a computed quantile table

        Args:
            results (ResultsQuantileTable): The computed table
    '''
    def __init__(self, results):
        self._results = results

    def _repr_markdown_(self):
        return self.summary().get_md()

    def _title(self):
        return (f'q(k, df, no.ranges={self._results.nrng:4d}; '
                f'alpha={self._results.alpha:5.2f})')

    def summary(self):
        ''' Markdown table of upper quantiles, one row per df '''
        rpt = report.Report()
        rpt.hdr('Studentised maximum range upper quantiles', level=2)
        rpt.txt(self._title() + '\n\n')
        hdr = ['df'] + [f'k={k}' for k in self._results.kvals]
        rows = []
        for df, qrow in zip(self._results.dfvals, self._results.quantiles):
            rows.append([_dfstr(df)] + [report.format_quantile(q).strip() for q in qrow])
        rpt.table(rows, hdr)
        rpt.txt(f'Maximum iterations: {self._results.maxiter}\n\n')
        if not self._results.converged:
            rpt.txt('**Warning:** some quantiles did not converge.\n\n')
        return rpt

    def text(self):
        ''' Fixed-width plain text table '''
        kvals = self._results.kvals
        width = 7*(len(kvals)-1) + 12
        line = '-'*width + '\n'
        header = f' df  k->{kvals[0]:3d}' + ''.join(f'{k:7d}' for k in kvals[1:]) + '\n'

        s = 'The Studentised maximum range upper quantiles\n'
        s += self._title() + '\n'
        s += line + header + line
        for i, (df, qrow) in enumerate(zip(self._results.dfvals, self._results.quantiles)):
            s += f'{_dfstr(df):>3s}  ' + ''.join(report.format_quantile(q) for q in qrow) + '\n'
            if (i+1) % 10 == 0:
                s += line
            if (i+1) == 20 and self._results.index == 2:
                s += header + line
        s += line
        s += f'max.iterations = {self._results.maxiter:5d}\n'
        return s


def _dfstr(df):
    return 'Inf' if df <= 0 else str(df)
