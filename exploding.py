'''Exploding dice: roll again and add it on when the first roll meets a condition'''
from enum import Enum
from typing import Callable, Iterable
import operator
from die import die
from probability import probability

class ExplodingCondition(Enum):
    '''When a value explodes, compared against the threshold.'''
    LOWER = '<'
    LOWER_OR_EQUAL = '<='
    EQUAL = '=='
    GREATER_OR_EQUAL = '>='
    GREATER = '>'

relations = {
    ExplodingCondition.LOWER: operator.lt,
    ExplodingCondition.LOWER_OR_EQUAL: operator.le,
    ExplodingCondition.EQUAL: operator.eq,
    ExplodingCondition.GREATER_OR_EQUAL: operator.ge,
    ExplodingCondition.GREATER: operator.gt,
}

def exploding_helper(threshold, condition:ExplodingCondition,
                     explosion:die) -> Callable[..., die]:
    '''
    Returns a function for die.add_dependent (or die + function): it gives
    explosion for values where (value condition threshold) holds, and the neutral
    distribution for everything else.
    Only explodes once. The added roll isn't checked again, so for a second level
    nest the calls yourself, eg
    base + exploding_helper(6, GREATER_OR_EQUAL, base + exploding_helper(6, ...))
    '''
    relation = relations[condition]
    neutral = die.empty()
    def explode(value) -> die:
        if relation(value, threshold):
            return explosion
        return neutral
    explode.__name__ = f'explode{condition.value}{threshold}({explosion})'
    return explode

def new_exploding(sides:int, threshold, condition:ExplodingCondition, explosion:die) -> die:
    '''
    A die with the given number of sides which explodes into explosion, ie
    new_exploding(6, 6, ExplodingCondition.EQUAL, die.new(6)) rolls another
    d6 on a 6.
    '''
    return die.new(sides) + exploding_helper(threshold, condition, explosion)

def exploding_from_range(start:int, end:int, threshold, condition:ExplodingCondition,
                         explosion:die) -> die:
    '''Like new_exploding, but the base roll is uniform over start..end'''
    return die.from_range(start, end) + exploding_helper(threshold, condition, explosion)

def exploding_from_values(values:Iterable, threshold, condition:ExplodingCondition,
                          explosion:die) -> die:
    '''Like new_exploding, but the base roll is uniform over values'''
    return die.from_values(values) + exploding_helper(threshold, condition, explosion)

def exploding_from_probabilities(probabilities:Iterable[probability], threshold,
                                 condition:ExplodingCondition, explosion:die) -> die:
    '''Like new_exploding, but the base roll is die.from_probabilities(probabilities)'''
    return die.from_probabilities(probabilities) + \
        exploding_helper(threshold, condition, explosion)
