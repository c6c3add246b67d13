"""A commandline tool for quick tallying of free-form ballots.

Reads ballots one per line (see votetally.io.ballot for the format) and
ranks the candidates by the selected method.
"""

import argparse
import io
import logging
import sys
from typing import Optional

import votetally.io.core
import votetally.system
import votetally.vote
from votetally.system import Method
from votetally.vote import Ranking

argparser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-i', '--input-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='file to load ballots from',
)
argparser.add_argument(
    '-I', '--use-stdin',
    action='store_true',
    help='load ballots from standard input',
)
argparser.add_argument(
    '-m', '--method',
    choices=[method.value for method in Method],
    default=Method.PLURALITY.value,
    help='voting method to use',
)
argparser.add_argument(
    '-l', '--list-methods',
    action='store_true',
    help='list the available voting methods and exit',
)
argparser.add_argument(
    '-s', '--seed',
    type=int,
    help='seed for the random generator of the Weighted Random method',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all evaluator log messages and other info',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any evaluator log messages or other info',
)

TALLY_ERRORS = (
    votetally.io.core.ParseError,
    votetally.vote.VoteError,
    votetally.system.UnknownMethodError,
)


def main(input_file: Optional[io.TextIOBase] = None,
         use_stdin: bool = False,
         method: str = Method.PLURALITY.value,
         list_methods: bool = False,
         seed: Optional[int] = None,
         verbose: bool = False,
         quiet: bool = False,
         ) -> int:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s'
    )
    if list_methods:
        for avail_method in Method:
            print(avail_method.value)
        return 0
    if use_stdin:
        input_file = sys.stdin
    raw_votes = input_file.read()
    try:
        ranking = votetally.system.tally(raw_votes, method, seed=seed)
    except TALLY_ERRORS as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    show_ranking(ranking)
    return 0


def show_ranking(ranking: Ranking) -> None:
    """Show the ranking as a table with one-based ranks."""
    if not ranking:
        print('Nobody ranked')
        return
    left_col = ['candidate'] + [cand for cand, rank in ranking]
    right_col = ['rank'] + [str(rank + 1) for cand, rank in ranking]
    n_just_chars = len(max(left_col, key=len))
    for left, right in zip(left_col, right_col):
        print(left.ljust(n_just_chars), ' ', right)


if __name__ == '__main__':
    args = argparser.parse_args()
    if not args.input_file and not args.use_stdin and not args.list_methods:
        argparser.print_usage()
    else:
        sys.exit(main(**vars(args)))
