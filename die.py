'''Internal math: the distribution class and the algebra on it'''
from collections import defaultdict
from numbers import Real
from typing import Callable, Iterable
import numpy as np
import re
from probability import probability, Numeric

class die:
    '''
    A class for managing exact discrete distributions. Each distribution is a sorted
    sequence of probability entries with pairwise distinct values. Values can be
    anything Numeric (ints in the usual dice case), chances should sum to 1 but this
    isn't checked or renormalized.
    This class works in a functional manner, so all public-facing methods return a
    new instance and never modify self.

    Use the constructors rather than __init__ directly:
    die.new(6) is a d6, die.from_range(2, 4) is uniform on 2, 3, 4,
    die.from_values([1, 1, 2]) is 1 with chance 2/3 and 2 with chance 1/3,
    die.from_probabilities([probability(0, .4), probability(5, .6)]) is anything else.

    If x, y are instances of this class, then
    x + y is the distribution of the sum of independent samples,
    x + 3 shifts every value by 3,
    x + f, where f takes a value and returns a die, rolls f(value) and adds it on.
    '''
    def __init__(self, probabilities:Iterable[probability], name=None):
        '''
        probabilities: probability entries, possibly unsorted and with repeated values.
        name (optional): A string, a name for this distribution.
        '''
        entries = list(probabilities)
        if len(entries) == 0:
            entries = [probability(0, 1.0)]
        self._probabilities: tuple[probability, ...] = tuple(compress(entries))
        self.name = 'custom' if name is None else clean_name(str(name))

    @classmethod
    def from_probabilities(cls, probabilities:Iterable[probability], name=None) -> 'die':
        '''
        The canonical constructor. Duplicate values are merged by summing their
        chances and the result is sorted by value. No entries gives the neutral
        distribution, 0 with chance 1.
        '''
        return cls(probabilities, name)

    @classmethod
    def empty(cls) -> 'die':
        '''The neutral distribution: 0 with chance 1. Adding it changes nothing.'''
        return cls([probability(0, 1.0)], '0')

    @classmethod
    def from_values(cls, values:Iterable, name=None) -> 'die':
        '''
        Each value gets an equal share of the chance, repeated values keep each of
        their shares, so from_values([1, 1, 2]) is 1 with chance 2/3.
        '''
        values = list(values)
        if name is None:
            name = f'[{", ".join(str(v) for v in values)}]'
        return cls(values_to_probabilities(values), name)

    @classmethod
    def from_range(cls, start:int, end:int) -> 'die':
        '''
        Uniform distribution over start, start+1, ..., end (inclusive).
        If end < start the bounds are swapped.
        '''
        if end < start:
            start, end = end, start
        return cls.from_values(range(start, end+1), f'[{start}..{end}]')

    @classmethod
    def new(cls, sides:int) -> 'die':
        '''
        A die with the given number of sides, so new(6) is uniform on 1 through 6.
        new(0) is the neutral distribution and new(-n) is uniform on -n through -1.
        '''
        if sides > 0:
            return cls.from_values(range(1, sides+1), f'1d{sides}')
        if sides == 0:
            return cls.empty()
        return cls.from_range(sides, -1)

    @property
    def probabilities(self) -> tuple[probability, ...]:
        '''The entries, sorted ascending by value.'''
        return self._probabilities

    def values(self) -> list:
        return [p.value for p in self._probabilities]

    def chances(self) -> list:
        return [p.chance for p in self._probabilities]

    def __iter__(self):
        return iter(self._probabilities)

    def __len__(self) -> int:
        return len(self._probabilities)

    def __getitem__(self, value) -> float:
        '''Returns the chance of getting value, 0.0 if it can't happen.'''
        for p in self._probabilities:
            if p.value == value:
                return p.chance
        return 0.0

    def __repr__(self) -> str:
        return f'die({list(self._probabilities)}, {self.name!r})'

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other) -> bool:
        '''
        True if self and other have the same values in the same order and the
        same chances. Note that this uses np.isclose, with no absolute
        tolerance, to compare the chances.
        '''
        if self is other:
            return True
        if not isinstance(other, die):
            return NotImplemented
        if len(self) != len(other) or self.values() != other.values():
            return False
        return bool(np.all(np.isclose(
            np.array(self.chances(), dtype=float),
            np.array(other.chances(), dtype=float), atol=0)))

    __hash__ = None # type: ignore

    def add_independent(self, other:'die') -> 'die':
        '''
        Gives the distribution of the sum of independent samples from self and other.
        Every pair of entries contributes (value + value, chance * chance).
        '''
        return die(
            (inner + outer for outer in other for inner in self),
            f'{self}+{other}'
        )

    def add_dependent(self, callback:Callable[..., 'die']) -> 'die':
        '''
        Gives the distribution of sampling from self, then sampling from
        callback(that value) and adding the two together.
        callback: takes a value, returns a die. Should be pure.
        '''
        # one call per entry, and self has no repeated values
        out = []
        for outer in self:
            out.extend(outer + inner for inner in callback(outer.value))
        return die(out, f'{self}+{callback_name(callback)}')

    def conditional_chain(self, callback:Callable[..., 'die']) -> 'die':
        '''
        Gives the distribution of sampling from self, then returning a sample of
        callback(that value). Unlike add_dependent the values aren't added, the
        outcome lives in callback's value space and self only decides the weights.
        callback: takes a value, returns a die. Should be pure.
        '''
        out = []
        for outer in self:
            out.extend(inner * outer.chance for inner in callback(outer.value))
        return die(out, f'{self}->{callback_name(callback)}')

    def add_flat(self, flat_increase) -> 'die':
        '''
        Adds flat_increase to every value, chances are unchanged.
        Float values can round together when shifted, those get merged.
        '''
        return die(
            (probability(p.value + flat_increase, p.chance) for p in self),
            f'{self}+{flat_increase}'
        )

    def __add__(self, other) -> 'die':
        '''
        other: A die class object, a number or a function from values to dice.
        Returns a new die class object, see add_independent, add_flat and
        add_dependent respectively.
        '''
        if isinstance(other, die):
            return self.add_independent(other)
        if callable(other):
            return self.add_dependent(other)
        if isinstance(other, (Real, Numeric)):
            return self.add_flat(other)
        return NotImplemented

    def __radd__(self, other) -> 'die':
        '''Variant of __add__, self-explanatory'''
        return self+other

    def get_probabilities(self) -> tuple[probability, ...]:
        return self._probabilities

    def get_min(self):
        return self._probabilities[0].value

    def get_max(self):
        return self._probabilities[-1].value

    def get_mean(self) -> float:
        return calc_mean(self._probabilities)

    def get_variance(self) -> float:
        return calc_variance(self._probabilities)

    def get_standard_deviation(self) -> float:
        return calc_standard_deviation(self._probabilities)

def compress(entries:Iterable[probability]) -> list[probability]:
    '''
    Internal function, merges entries with equal values by summing their chances,
    then sorts by value.
    Ex: compress([(2, .25), (1, .5), (2, .25)]) gives [(1, .5), (2, .5)]
    '''
    summary = defaultdict(int)
    for p in entries:
        summary[p.value] += p.chance
    return [probability(value, chance) for value, chance in sorted(summary.items())]

def values_to_probabilities(values:list) -> list[probability]:
    '''Internal function, gives each value an equal 1/n share of the chance.'''
    if len(values) == 0:
        return []
    chance = 1.0 / len(values)
    return [probability(v, chance) for v in values]

def _as_arrays(entries:Iterable[probability]) -> tuple[np.ndarray, np.ndarray]:
    entries = list(entries)
    x = np.array([float(p.value) for p in entries])
    pmf = np.array([float(p.chance) for p in entries])
    return x, pmf

def calc_mean(entries:Iterable[probability]) -> float:
    '''Internal function, returns the sum of chance * value.'''
    x, pmf = _as_arrays(entries)
    out = float(np.sum(x * pmf))
    if abs(out) < 2**(-53): # values below this are likely rounding artifacts
        out = 0.0 # so it's safer to just round to 0
    return out

def calc_variance(entries:Iterable[probability]) -> float:
    '''
    Internal function, returns E[X^2] - E[X]^2.
    Loses precision to cancellation when the values are large compared to the
    spread, which doesn't happen at dice scale.
    '''
    x, pmf = _as_arrays(entries)
    mu = float(np.sum(x * pmf))
    return max(float(np.sum(pmf * x**2)) - mu**2, 0.0)

def calc_standard_deviation(entries:Iterable[probability]) -> float:
    '''Internal function, returns the square root of the variance.'''
    return float(np.sqrt(calc_variance(entries)))

def callback_name(callback) -> str:
    '''Internal function, a label for a callback when naming a combined distribution.'''
    return getattr(callback, '__name__', type(callback).__name__)

def clean_name(name:str) -> str:
    '''Internal function, tidies up names like 1d6+-2 and 1d6--2.'''
    name = re.sub(r'\+\-', '-', name)
    name = re.sub(r'\-\-', '+', name)
    if len(name) > 0 and name[0] == '+':
        name = name[1:]
    return name
