''' Markdown report formatting and rendering '''

import numpy as np
import markdown


TABLE_CSS = '''<style type="text/css">
table {border-collapse: collapse;}
th, td {padding: 2px 8px; text-align: right;}
th {background-color: lightgray;}
</style>'''


def reporter(reportclass):
    ''' Class decorator adding a `report` property and Markdown representer
        to a results dataclass.

        Usage:

            @report.reporter(ReportXYZ)
            @dataclass
            class ResultsXYZ:
                ...
    '''
    def decorator(resultclass):
        @property
        def _report(self):
            return reportclass(self)

        def _repr_markdown_(self):
            return self.report.summary().get_md()

        resultclass.report = _report
        resultclass._repr_markdown_ = _repr_markdown_
        return resultclass
    return decorator


def format_quantile(q, width=7):
    ''' Format a quantile value for a table cell: 3 decimals below 100, 2 above '''
    if not np.isfinite(q):
        return f'{"nan":>{width}}'
    if q < 100:
        return f'{q:{width}.3f}'
    return f'{q:{width}.2f}'


class Report:
    ''' A Report consisting of headers, text, and tables for formatting in
        markdown or HTML.
    '''
    def __init__(self):
        self._s = ''

    def __str__(self):
        return self.get_md()

    def _repr_markdown_(self):
        ''' Markdown representation for Jupyter '''
        return self.get_md()

    def hdr(self, text, level=1):
        ''' Add a header to the report

            Args:
                text (string): Text of the header
                level (int): Header level. 1 is top level (# HEADER) in markdown.
        '''
        self._s += f'{"#"*level} {text}\n\n'

    def txt(self, text):
        ''' Add text to the report '''
        self._s += text

    def table(self, rows, hdr):
        ''' Add a table to the report

            Args:
                rows (list): List of lists of strings for each row.
                hdr (list): List of strings for the table header.
        '''
        widths = np.array([len(str(h))+1 for h in hdr], dtype=int)
        for row in rows:
            widths = np.maximum(widths, np.array([len(str(c)) for c in row]))
        widths = np.maximum(widths + 1, 5)

        lines = [' | '.join(f'{str(h):{w}}' for w, h in zip(widths, hdr))]
        lines.append('|'.join(w*'-' for w in widths))
        for row in rows:
            lines.append(' | '.join(f'{str(c):{w}}' for w, c in zip(widths, row)))
        self._s += '\n' + ''.join(f'|{line}|\n' for line in lines) + '\n\n'

    def get_md(self):
        ''' Get the report in markdown format '''
        return self._s.strip()

    def get_html(self):
        ''' Get report in HTML format, including CSS header '''
        html = markdown.markdown(self.get_md(), extensions=['markdown.extensions.tables'])
        html = html.encode('ascii', 'xmlcharrefreplace').decode('utf-8')
        return TABLE_CSS + '\n' + html
