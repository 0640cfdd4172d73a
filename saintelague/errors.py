'''Errors raised when a seat distribution cannot be determined.

All of them derive from :class:`DistributionError`. The first three signal
invalid input and are also :class:`ValueError` subclasses; :class:`Tied`
signals a valid input whose result depends on a random draw that was not
permitted.

The error class is the programmatic contract, the message is informational.
Instances of the same class compare equal, so the kind can be checked both
by ``isinstance`` and by comparing to a freshly constructed error.

``ERRORS`` lists all the error classes that can be raised.
'''

from typing import Any, Optional


class DistributionError(Exception):
    '''A seat distribution could not be determined.'''
    message = 'Seat distribution could not be determined.'

    def __init__(self, message: Optional[str] = None):
        super().__init__(self.message if message is None else message)

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'


class Tied(DistributionError):
    '''Multiple parties were tied for the last seat.

    Pass ``draw_on_tie=True`` to the distribution to resolve the tie by
    a random draw instead.
    '''
    message = ('Tie detected, could only be resolved by randomly awarding'
               ' a seat to one party.')


class InvalidSeatCount(DistributionError, ValueError):
    '''The given seat count was not larger than zero.'''
    message = 'Invalid seat count, must be an integer larger than 0.'


class NegativeVotes(DistributionError, ValueError):
    '''The given list of votes contained negative values.'''
    message = 'Invalid votes, all parties must have at least zero votes.'


class NoVotes(DistributionError, ValueError):
    '''The votes contained no values or their sum was zero.'''
    message = 'Invalid votes, one party must have at least one vote.'


ERRORS = (Tied, InvalidSeatCount, NegativeVotes, NoVotes)
