'''Outcome entries, the (value, chance) pairs distributions are made of'''
from functools import total_ordering
from math import floor
from numbers import Real
from typing import Protocol, runtime_checkable
from dice_strings import BAR_LENGTH, DECIMAL_FORMAT, NUMBER_FORMAT

@runtime_checkable
class Numeric(Protocol):
    '''
    What a value needs to support to live in a distribution: a total order,
    addition with other values, and conversion to float for the statistics.
    int, float and fractions.Fraction all qualify.
    '''
    def __lt__(self, other) -> bool: ...
    def __add__(self, other): ...
    def __float__(self) -> float: ...

@total_ordering
class probability:
    '''
    A single outcome of a distribution: value happens with the given chance.
    Two entries are equal iff their values are equal, chance is not part of
    the identity, so entries can be grouped and merged purely by value.

    entry + entry is the outcome of two independent events happening together,
    entry * number scales the chance.
    '''
    __slots__ = ('value', 'chance')

    def __init__(self, value, chance:float):
        self.value = value
        self.chance = chance

    def __eq__(self, other) -> bool:
        if not isinstance(other, probability):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other) -> bool:
        if not isinstance(other, probability):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __add__(self, other:'probability') -> 'probability':
        if not isinstance(other, probability):
            return NotImplemented
        return probability(self.value + other.value, self.chance * other.chance)

    def __mul__(self, other:float) -> 'probability':
        if not isinstance(other, Real):
            return NotImplemented
        return probability(self.value, self.chance * other)

    def __rmul__(self, other:float) -> 'probability':
        return self*other

    def __iter__(self):
        # lets entries unpack as value, chance = entry
        yield self.value
        yield self.chance

    def __repr__(self) -> str:
        return f'probability({self.value!r}, {self.chance!r})'

    def __str__(self) -> str:
        '''One histogram line: value : percentage : bar'''
        bar = '#' * floor(self.chance * BAR_LENGTH)
        return (f'{str(self.value):>{NUMBER_FORMAT}} : '
                f'{float(self.chance) * 100:>{NUMBER_FORMAT}.{DECIMAL_FORMAT}f} : '
                f'{bar:-<{BAR_LENGTH}}')
