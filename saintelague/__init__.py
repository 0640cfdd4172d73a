"""saintelague - parliament seat allocation by the Sainte-Laguë method.

The Sainte-Laguë method (also known as the Webster or Schepers method) is
a highest averages method of proportional seat allocation used in multiple
countries such as Germany, Latvia or New Zealand. Some countries (like Latvia
or Norway) use a modification of the method instead of this plain version,
so check the electoral legislature of your country before relying on it.

-   :func:`allocate` from the ``evaluate`` module computes the distribution
    for a plain sequence of votes, positionally.
-   :class:`SainteLague` from the same module wraps it as an evaluator
    working on dictionaries of votes keyed by party.
-   The ``errors`` module lists the reasons why a distribution might not be
    determined, including a tie for the last seat.

Votes need not be integers, so relative vote shares can be used as well.
"""

from saintelague.errors import (    # noqa: F401
    DistributionError, Tied, InvalidSeatCount, NegativeVotes, NoVotes
)
from saintelague.evaluate import allocate, SainteLague    # noqa: F401
