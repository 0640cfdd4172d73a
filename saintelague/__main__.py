"""A commandline tool for quick Sainte-Laguë seat allocation.

Takes the votes for each party as arguments and prints the number of seats
awarded to each of them.
"""

import argparse
import logging
import sys
from typing import Optional, List, Dict, Any

from saintelague.errors import DistributionError
from saintelague.evaluate import SainteLague

argparser = argparse.ArgumentParser(
    prog='saintelague',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    'votes',
    nargs='+',
    type=float,
    help='votes (or vote shares) for each party',
)
argparser.add_argument(
    '-n', '--n-seats',
    type=int,
    required=True,
    help='award this many seats',
)
argparser.add_argument(
    '-d', '--draw-on-tie',
    action='store_true',
    help='award seats tied at the cutoff by a random draw instead of failing',
)
argparser.add_argument(
    '--seed',
    type=int,
    help='seed for the random draw',
)
argparser.add_argument(
    '-p', '--party-names',
    nargs='*',
    help='names of the parties in the order of votes; default numbers them',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any log messages except errors',
)


def main(votes: List[float],
         n_seats: int,
         draw_on_tie: bool = False,
         seed: Optional[int] = None,
         party_names: Optional[List[str]] = None,
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
    if party_names is None:
        party_names = [str(i) for i in range(1, len(votes) + 1)]
    elif len(party_names) != len(votes):
        argparser.error(
            f'got {len(party_names)} party names for {len(votes)} votes'
        )
    elif len(set(party_names)) != len(party_names):
        argparser.error('party names must be unique')
    evaluator = SainteLague(draw_on_tie=draw_on_tie, seed=seed)
    logging.info('distributing %d seats among %d parties by %r',
                 n_seats, len(votes), evaluator)
    try:
        result = evaluator.evaluate(dict(zip(party_names, votes)), n_seats)
    except DistributionError as err:
        logging.error('%s', err)
        return 1
    logging.debug('seats awarded: %s', result)
    show_distribution(result)
    return 0


def show_distribution(result: Dict[Any, int]) -> None:
    """Show the seats awarded to each party, one per line."""
    left_col = [str(party) for party in result.keys()]
    n_just_chars = len(max(left_col, key=len))
    for party, n_seats in zip(left_col, result.values()):
        print(party.ljust(n_just_chars), ' ', n_seats)


def run() -> None:
    sys.exit(main(**vars(argparser.parse_args())))


if __name__ == '__main__':
    run()
