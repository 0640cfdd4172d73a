import sys
import os
import math

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import saintelague.quotient as q
from saintelague.quotient import PartyQuotient

TEST_ORDERS = list(range(10)) + [100, 1000, 10000]


@pytest.mark.parametrize('order', TEST_ORDERS)
def test_divisor_odd(order):
    divisor = q.sainte_lague(order)
    assert divisor > 0
    assert 2 * divisor == 2 * order + 1


def test_divisor_sequence():
    assert [q.sainte_lague(i) for i in range(4)] == [.5, 1.5, 2.5, 3.5]


def test_generate():
    assert q.generate([3.0, 1.0], 2) == [
        PartyQuotient(0, 6.0),
        PartyQuotient(0, 2.0),
        PartyQuotient(1, 2.0),
        PartyQuotient(1, 1 / 1.5),
    ]


def test_generate_size():
    quotients = q.generate([5, 0, 3, 8], 7)
    assert len(quotients) == 4 * 7
    assert all(pq.quotient == 0 for pq in quotients if pq.party == 1)


def test_generate_integer_votes():
    assert q.generate([1], 1) == [PartyQuotient(0, 2.0)]


def test_ranked_descending_stable():
    quotients = q.generate([3.0, 1.0], 2)
    assert q.ranked(quotients) == [
        PartyQuotient(0, 6.0),
        PartyQuotient(0, 2.0),
        PartyQuotient(1, 2.0),
        PartyQuotient(1, 1 / 1.5),
    ]
    assert q.ranked(list(reversed(quotients))) == [
        PartyQuotient(0, 6.0),
        PartyQuotient(1, 2.0),
        PartyQuotient(0, 2.0),
        PartyQuotient(1, 1 / 1.5),
    ]


def test_ranked_nan():
    quotients = [
        PartyQuotient(0, 1.0),
        PartyQuotient(1, math.nan),
        PartyQuotient(2, 2.0),
    ]
    result = q.ranked(quotients)
    assert sorted(pq.party for pq in result) == [0, 1, 2]


def test_ranked_empty():
    assert q.ranked([]) == []
