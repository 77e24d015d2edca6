''' Test quantile table generation and setup files '''
import io
import numpy as np

from smrange import QuantileTable
from smrange.table import k_grid, df_grid


def test_grids():
    assert k_grid(2) == [2]
    assert k_grid(10) == list(range(2, 11))
    assert k_grid(100) == list(range(2, 101))
    assert k_grid(1000) == list(range(2, 21)) + [50, 100, 200, 500, 1000]

    dfs = df_grid(1)
    assert dfs == list(range(1, 21)) + [24, 30, 40, 60, 120, 0]
    dfs = df_grid(2)
    assert dfs == list(range(1, 41)) + [48, 60, 80, 120, 240, 0]
    assert df_grid(5) == df_grid(2)


def test_table():
    table = QuantileTable(k_end=3, alpha=.05)
    result = table.calculate()
    assert result.quantiles.shape == (26, 2)
    assert result.converged
    assert 0 < result.maxiter < 250
    assert np.isclose(result.quantile(3, 10), 3.877, atol=.0006)
    assert np.isclose(result.quantile(2, 0), 2.772, atol=.0006)
    assert np.isclose(result.quantile(2, 1), 17.97, atol=.006)
    # Quantiles decrease with df
    assert np.all(np.diff(result.quantiles, axis=0) < 0)

    # Plain text layout
    txt = result.report.text()
    lines = txt.splitlines()
    assert lines[0] == 'The Studentised maximum range upper quantiles'
    assert lines[1] == 'q(k, df, no.ranges=   1; alpha= 0.05)'
    assert lines[3] == ' df  k->  2      3'
    assert lines[5].startswith('  1   17.969')
    assert any(line.startswith('Inf    2.772') for line in lines)
    assert lines[-1].startswith('max.iterations = ')
    assert all(len(line) == 19 for line in lines if line.startswith('-'))

    # Markdown and HTML
    md = result.report.summary().get_md()
    assert '|df' in md
    assert '3.877' in md
    html = result.report.summary().get_html()
    assert '<table' in html
    assert '3.877' in html
    assert str(result.report.summary()) == md
    assert result._repr_markdown_() == md


def test_config(tmp_path):
    fname = tmp_path / 'table.yaml'
    fname.write_text('k_end: 5\nalpha: 0.01\nindex: 2\nnrng: 3\n')
    table = QuantileTable.from_configfile(str(fname))
    assert table.k_end == 5
    assert table.alpha == .01
    assert table.index == 2
    assert table.nrng == 3
    assert table.kvals == [2, 3, 4, 5]
    assert len(table.dfvals) == 46

    # File objects
    table = QuantileTable.from_configfile(io.StringIO('k_end: 4\nalpha: 0.1\n'))
    assert table.get_config() == {'k_end': 4, 'alpha': .1, 'index': 1, 'nrng': 1, 'xtol': 1E-8}

    # Invalid setups
    assert QuantileTable.from_configfile(io.StringIO('- 1\n- 2\n')) is None
    assert QuantileTable.from_configfile(io.StringIO('k_end: [1, 2\n')) is None
