#!/usr/bin/env python
''' Studentised maximum range - command line interface.

    Multiple commands are installed:
        smrange: Calculate a single upper quantile q(k, df, nrng; alpha)
        smrangetbl: Tabulate upper quantiles over k and df
        smrangef: Tabulate upper quantiles from a config (yaml) file
'''
import os
import sys
import logging
import argparse

from smrange.quantile import smrange_quantile, XTOL
from smrange.qtable import DF_INTERP
from smrange.table import QuantileTable


def _set_verbosity(verbose):
    ''' Show solver log messages with -v (info) or -vv (debug) '''
    if verbose > 0:
        logging.basicConfig(level=logging.DEBUG if verbose > 1 else logging.INFO)


def _write_table(table, fileobj, fmt):
    ''' Calculate the table and write it in the requested format '''
    result = table.calculate()
    if fileobj and hasattr(fileobj, 'name') and fileobj.name != '<stdout>':
        _, ext = os.path.splitext(str(fileobj.name))
        fmt = ext[1:] or fmt  # remove '.'

    if fmt == 'html':
        fileobj.write(result.report.summary().get_html())
    elif fmt == 'md':
        fileobj.write(result.report.summary().get_md())
    else:
        fileobj.write(result.report.text())


def main_query(args=None):
    ''' Calculate one upper quantile of the Studentised maximum range '''
    parser = argparse.ArgumentParser(prog='smrange',
                                     description='Upper quantile of the Studentised maximum range distribution.')
    parser.add_argument('k', help='Number of treatments', type=int)
    parser.add_argument('df', help='Error degrees of freedom (0 for infinity)', type=int)
    parser.add_argument('alpha', help='Upper-tail probability', type=float)
    parser.add_argument('--nrng', help='Number of independent ranges', type=int, default=1)
    parser.add_argument('--xtol', help='Tolerance on the quantile', type=float, default=XTOL)
    parser.add_argument('-o', help='Output filename', type=argparse.FileType('w', encoding='UTF-8'),
                        default=sys.stdout)
    parser.add_argument('--verbose', '-v', help='Show solver messages', action='count', default=0)
    args = parser.parse_args(args=args)
    _set_verbosity(args.verbose)

    p = 1.0 - args.alpha
    ptol = args.alpha * args.xtol
    result = smrange_quantile(p, args.k, args.df, args.nrng, args.xtol, ptol)
    args.o.write(f'itr = {result.iterations:4d}, quantile = {result.x:20.16g}\n')

    if args.df > DF_INTERP:
        # Linear interpolation in 1/df between df=240 and infinity
        x0 = smrange_quantile(p, args.k, 0, args.nrng, args.xtol, ptol)
        x1 = smrange_quantile(p, args.k, DF_INTERP, args.nrng, args.xtol, ptol)
        x = (x1.x - x0.x) * (DF_INTERP / args.df) + x0.x
        args.o.write('Interpolation in 1/df\n')
        args.o.write(f'itr = {x1.iterations:4d}, quantile = {x:20.16g}\n')


def main_table(args=None):
    ''' Tabulate upper quantiles of the Studentised maximum range '''
    parser = argparse.ArgumentParser(prog='smrangetbl',
                                     description='Table of Studentised maximum range upper quantiles.')
    parser.add_argument('k_end', help='Last k column. Values above 100 use k = 2..20, 50, 100, 200, 500, 1000.',
                        type=int)
    parser.add_argument('alpha', help='Upper-tail probability', type=float)
    parser.add_argument('--index', help='df rows: 1 for df=1..20, 2 for df=1..40', type=int, default=1)
    parser.add_argument('--nrng', help='Number of independent ranges', type=int, default=1)
    parser.add_argument('-o', help='Output filename. Extension determines file format.',
                        type=argparse.FileType('w', encoding='UTF-8'), default=sys.stdout)
    parser.add_argument('-f', help="Output format for when output filename not provided ['txt', 'html', 'md']",
                        type=str, choices=['html', 'txt', 'md'], default='txt')
    parser.add_argument('--verbose', '-v', help='Show solver messages', action='count', default=0)
    args = parser.parse_args(args=args)
    _set_verbosity(args.verbose)

    table = QuantileTable(k_end=args.k_end, alpha=args.alpha, index=args.index, nrng=args.nrng)
    _write_table(table, args.o, args.f)


def main_setup(args=None):
    ''' Tabulate upper quantiles defined in YAML setup file '''
    parser = argparse.ArgumentParser(prog='smrangef', description='Run quantile table from setup file.')
    parser.add_argument('filename', help='Setup parameter file.', type=str)
    parser.add_argument('-o', help='Output filename. Extension determines file format.',
                        type=argparse.FileType('w', encoding='UTF-8'), default=sys.stdout)
    parser.add_argument('-f', help="Output format for when output filename not provided ['txt', 'html', 'md']",
                        type=str, choices=['html', 'txt', 'md'], default='txt')
    parser.add_argument('--verbose', '-v', help='Show solver messages', action='count', default=0)
    args = parser.parse_args(args=args)
    _set_verbosity(args.verbose)

    table = QuantileTable.from_configfile(args.filename)
    if table is None:
        parser.error(f'Unable to read setup file {args.filename}')
    _write_table(table, args.o, args.f)


if __name__ == '__main__':
    main_query()
