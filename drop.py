'''Distributions of dice pools where some of the highest or lowest dice are dropped'''
from bisect import insort
from collections import defaultdict
from enum import Enum
from typing import Iterable, Sequence
import logging
from die import die
from probability import probability

logger = logging.getLogger(__name__)

class DropType(Enum):
    '''Which end of the sorted roll gets thrown away.'''
    HIGH = 'highest'
    LOW = 'lowest'

def _keep(rolled:list, drop_type:DropType, keep:int) -> tuple:
    '''
    Internal function. rolled is sorted ascending, returns the values that can
    still survive once everything has been rolled.
    '''
    if keep == 0:
        return ()
    if drop_type is DropType.HIGH:
        return tuple(rolled[:keep])
    return tuple(rolled[-keep:])

def drop_by_condition(dice:Sequence[die], drop_type:DropType, drop_amount:int,
                      name=None) -> die:
    '''
    Calculates the distribution of rolling every die in dice, throwing out the
    drop_amount highest (DropType.HIGH) or lowest (DropType.LOW) results, and
    adding up the rest. The dice are assumed to be independent.
    dice: A list of die class objects, they don't have to be identical
    drop_type: A DropType
    drop_amount: An int. 0 or less keeps everything, len(dice) or more drops
                 everything (giving a guaranteed 0)
    name (optional): A string, a name for the result.

    Returns a new die class object.
    '''
    dice = list(dice)
    keep = max(len(dice) - max(drop_amount, 0), 0)
    # Rather than listing all n^k joint rolls, we roll one die at a time and
    # only remember the sorted values that could still be kept. Rolls that agree
    # on those values are merged, so this is equivalent to
    # for each joint roll:
    #     sort, drop from one end, sum the rest, record (sum, product of chances)
    # but the number of states stays polynomial in the die size.
    states = {(): 1}
    for current in dice:
        next_states = defaultdict(int)
        for kept, chance in states.items():
            for value, value_chance in current:
                rolled = list(kept)
                insort(rolled, value)
                next_states[_keep(rolled, drop_type, keep)] += chance * value_chance
        states = next_states
    logger.debug('folded %d dice (dropping %d %s) into %d states',
                 len(dice), len(dice) - keep, drop_type.value, len(states))
    out = die.from_probabilities(
        (probability(sum(kept), chance) for kept, chance in states.items()),
        name or f'{len(dice)} dice drop {drop_type.value} {drop_amount}'
    )
    logger.debug('drop result has %d distinct values', len(out))
    return out

def _pool(base:die, roll_amount:int) -> list[die]:
    if roll_amount < 0:
        raise ValueError('roll_amount must be >= 0')
    return [base] * roll_amount

def new_drop(sides:int, roll_amount:int, drop_amount:int, drop_type:DropType) -> die:
    '''
    Rolls roll_amount dice with the given number of sides and drops drop_amount
    of them, ie new_drop(6, 4, 1, DropType.LOW) is 4d6 drop lowest.
    '''
    return drop_by_condition(_pool(die.new(sides), roll_amount), drop_type, drop_amount,
                             f'{roll_amount}d{sides} drop {drop_type.value} {drop_amount}')

def drop_from_range(start:int, end:int, roll_amount:int, drop_amount:int,
                    drop_type:DropType) -> die:
    '''Like new_drop, but each die is uniform over start..end, see die.from_range'''
    return drop_by_condition(_pool(die.from_range(start, end), roll_amount),
                             drop_type, drop_amount)

def drop_from_values(values:Iterable, roll_amount:int, drop_amount:int,
                     drop_type:DropType) -> die:
    '''Like new_drop, but each die is uniform over values, see die.from_values'''
    return drop_by_condition(_pool(die.from_values(values), roll_amount),
                             drop_type, drop_amount)

def drop_from_probabilities(probabilities:Iterable[probability], roll_amount:int,
                            drop_amount:int, drop_type:DropType) -> die:
    '''Like new_drop, but each die is die.from_probabilities(probabilities)'''
    return drop_by_condition(_pool(die.from_probabilities(probabilities), roll_amount),
                             drop_type, drop_amount)
