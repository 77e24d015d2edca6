''' Test command-line interface '''

from smrange import smrange_quantile, QuantileTable
from smrange import __main__ as cli


def test_query(capsys):
    ''' Test single quantile '''
    result = smrange_quantile(1.0 - 0.05, 3, 10, ptol=0.05 * 1E-8)
    cli.main_query(['3', '10', '0.05'])
    out, err = capsys.readouterr()
    assert out == f'itr = {result.iterations:4d}, quantile = {result.x:20.16g}\n'
    assert float(out.split('=')[-1]) == result.x


def test_query_interp(capsys):
    ''' Large df prints interpolated value '''
    cli.main_query(['4', '480', '0.05', '--nrng', '2'])
    out, err = capsys.readouterr()
    lines = out.splitlines()
    assert len(lines) == 3
    assert lines[1] == 'Interpolation in 1/df'
    q480 = float(lines[0].split('=')[-1])
    qinterp = float(lines[2].split('=')[-1])
    assert abs(q480 - qinterp) < .01


def test_table(capsys):
    ''' Test table output matches the table report '''
    result = QuantileTable(k_end=2, alpha=.05).calculate()
    cli.main_table(['2', '0.05'])
    out, err = capsys.readouterr()
    assert out == result.report.text()

    cli.main_table(['2', '0.05', '-f', 'md'])
    out, err = capsys.readouterr()
    assert out == result.report.summary().get_md()


def test_setup(capsys, tmp_path):
    ''' Test running a yaml file '''
    fname = tmp_path / 'table.yaml'
    fname.write_text('k_end: 2\nalpha: 0.05\n')
    table = QuantileTable.from_configfile(str(fname))
    report = table.calculate().report.summary().get_html()
    cli.main_setup([str(fname), '-f', 'html'])
    out, err = capsys.readouterr()
    assert out == report
