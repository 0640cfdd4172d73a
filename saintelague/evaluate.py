'''Distribute seats by the Sainte-Laguë highest averages method.

Divides the vote count for each party by the sequence of Sainte-Laguë
divisors, ranks these quotients and awards a seat for each of the first
``n_seats`` quotients. The result is usually quite close to proportionality
and, unlike the largest remainder methods, avoids the Alabama paradox.

Two interfaces are provided. :func:`allocate` works positionally on a plain
sequence of votes and is the core computation; :class:`SainteLague` wraps it
as an evaluator that maps parties to their votes and seats.

Votes need not be integers: relative vote shares work just as well.

If more quotients are tied at the cutoff than there are seats left for them,
the result is not determined by the votes. This raises
:class:`~saintelague.errors.Tied` unless a random draw is requested with
``draw_on_tie``.
'''

import random
from typing import Any, Dict, List, Optional, Sequence
from numbers import Number

import saintelague.quotient
import saintelague.util
from saintelague.errors import InvalidSeatCount, NegativeVotes, NoVotes, Tied


def allocate(votes: Sequence[Number],
             n_seats: int,
             draw_on_tie: bool = False,
             rng: Optional[random.Random] = None,
             ) -> List[int]:
    '''Distribute seats among the parties by the Sainte-Laguë method.

    >>> allocate([41.5, 25.7, 8.6, 8.4], 631)
    [311, 193, 64, 63]

    :param votes: Votes for each party. The position of the vote count
        identifies the party in the result.
    :param n_seats: Number of seats to be filled.
    :param draw_on_tie: Whether to award the seats tied at the cutoff by
        a random draw. If False, such a tie raises :class:`Tied`.
    :param rng: Random generator for the draw. A fresh unseeded one is used
        if not given.
    :returns: Number of seats for each party, in the order of *votes*.
    :raises InvalidSeatCount: If *n_seats* is smaller than one.
    :raises NegativeVotes: If any party has a negative number of votes.
    :raises NoVotes: If there are no votes or they sum to zero.
    :raises Tied: If the result depends on a draw and *draw_on_tie* is False.
    '''
    if n_seats < 1:
        raise InvalidSeatCount
    if any(n_votes < 0 for n_votes in votes):
        raise NegativeVotes
    if sum(votes) == 0:
        raise NoVotes
    quotients = saintelague.quotient.ranked(
        saintelague.quotient.generate(votes, n_seats)
    )
    if len(quotients) >= n_seats:
        threshold = quotients[n_seats - 1].quotient
    else:
        threshold = 0.0
    winners = [pq for pq in quotients if pq.quotient > threshold]
    possible_winners = [pq for pq in quotients if pq.quotient == threshold]
    # the last winning quotient equals the first losing one
    seats_too_many = len(winners) + len(possible_winners) - n_seats
    if seats_too_many > 0:
        if not draw_on_tie:
            raise Tied
        winners.extend(saintelague.util.select_n_random(
            possible_winners,
            len(possible_winners) - seats_too_many,
            rng=rng,
        ))
    else:
        winners.extend(possible_winners)
    distribution = [0] * len(votes)
    for pq in winners:
        distribution[pq.party] += 1
    return distribution


class SainteLague:
    '''Distribute seats proportionally by the Sainte-Laguë method.

    Also known as the Webster or Schepers method. Used in parliamentary
    elections in Germany, Latvia or New Zealand, among others; some of these
    countries use a modified version, so check the electoral law before
    relying on this one.

    :param draw_on_tie: Whether to award seats tied at the cutoff by a random
        draw. If False, the tie raises :class:`~saintelague.errors.Tied`.
    :param seed: Seed for the random generator that performs the draw. If
        given, repeated evaluations of the same votes give the same result.
    '''
    def __init__(self,
                 draw_on_tie: bool = False,
                 seed: Optional[int] = None,
                 ):
        self.draw_on_tie = draw_on_tie
        self.seed = seed
        self.stable = (self.seed is not None)

    def evaluate(self,
                 votes: Dict[Any, Number],
                 n_seats: int,
                 ) -> Dict[Any, int]:
        '''Distribute seats proportionally by highest averages.

        :param votes: Simple votes to be evaluated, keyed by party.
        :param n_seats: Number of seats to be filled.
        :returns: Number of seats for each party from *votes*, including
            parties with no seats, in the order of *votes*.
        '''
        parties = list(votes.keys())
        seats = allocate(
            [votes[party] for party in parties],
            n_seats,
            draw_on_tie=self.draw_on_tie,
            rng=random.Random(self.seed),
        )
        return dict(zip(parties, seats))

    def __repr__(self) -> str:
        return (f'{self.__class__.__name__}(draw_on_tie={self.draw_on_tie!r},'
                f' seed={self.seed!r})')
