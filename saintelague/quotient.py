'''Quotients ranked by the Sainte-Laguë highest averages method.

The vote count of each party is divided by an increasing sequence of
divisors; the quotients of all parties are then ranked together and each of
the first ``n_seats`` quotients wins a seat for its party.

The Sainte-Laguë divisors are usually written as the odd numbers 1, 3, 5...
Here they are halved to 0.5, 1.5, 2.5... This does not change the ranking
but keeps the quotients in the same floating-point form as vote shares, so
that ties are detected between exactly equal quotients.
'''

import functools
from typing import List, NamedTuple, Sequence
from numbers import Number


class PartyQuotient(NamedTuple):
    '''A single quotient competing for a seat.

    :param party: Index of the party in the input votes.
    :param quotient: Votes of the party divided by the divisor.
    '''
    party: int
    quotient: float


def sainte_lague(order: int) -> float:
    '''Sainte-Laguë (Webster, Schepers) divisor.

    Forms a sequence 0.5, 1.5, 2.5...

    :param order: Number of seats already awarded to the party.
    '''
    return order + 0.5


def generate(votes: Sequence[Number], n_seats: int) -> List[PartyQuotient]:
    '''Compute all quotients that could win one of the seats.

    Each party gets ``n_seats`` quotients, one for every divisor up to the
    one it would face when holding all the seats, so the result has
    ``len(votes) * n_seats`` entries, party by party.

    :param votes: Vote counts of the parties, positionally.
    :param n_seats: Number of seats to be filled.
    '''
    divisors = [sainte_lague(order) for order in range(n_seats)]
    return [
        PartyQuotient(party, n_votes / divisor)
        for party, n_votes in enumerate(votes)
        for divisor in divisors
    ]


def _compare_descending(first: PartyQuotient, second: PartyQuotient) -> int:
    # incomparable quotients (NaN) are considered equal
    if first.quotient > second.quotient:
        return -1
    elif first.quotient < second.quotient:
        return 1
    else:
        return 0


def ranked(quotients: Sequence[PartyQuotient]) -> List[PartyQuotient]:
    '''Return the quotients sorted from the highest.

    The sort is stable, so equal quotients keep their generation order.
    '''
    return sorted(quotients, key=functools.cmp_to_key(_compare_descending))
