'''User-facing functions'''
from die import die
from drop import DropType, new_drop
from exploding import ExplodingCondition, new_exploding

def mean(d: die) -> float:
    '''Returns the mean of a die class object.'''
    return d.get_mean()

def var(d: die) -> float:
    '''Returns the variance of a die class object.'''
    return d.get_variance()

def sd(d: die) -> float:
    '''Returns the standard deviation of a die class object.'''
    return d.get_standard_deviation()

def _parse_mode(mode: str) -> tuple[bool, DropType]:
    '''
    Internal function, turns "keep highest", "dl", etc into
    (keep, which end the n dice are counted from).
    '''
    words = mode.lower().split()
    if len(words) == 1 and len(words[0]) == 2:
        words = list(words[0])
    if len(words) != 2:
        raise ValueError(f'Invalid drop mode {mode!r}')
    action, side = words[0][0], words[1][0]
    if action not in ('k', 'd') or side not in ('h', 'l'):
        raise ValueError(f'Invalid drop mode {mode!r}')
    return action == 'k', DropType.HIGH if side == 'h' else DropType.LOW

def drop(count: int, faces: int, mode: str, n: int = 1) -> die:
    '''
    Calculates the distribution of rolling count die, where each die has faces sides.
    If mode is "keep highest", we keep the highest n die, throw out
    the rest, then take the sum. Any combination of "keep"/"drop" and
    "highest"/"lowest" works for mode.
    count: int, the number of die
    faces: int, the number of faces on each die
    mode: string. Any combination of "keep"/"drop" and "highest"/"lowest", ie
        "keep highest" is valid. You can also abbreviate words to their first
        letter, ie "kh" for "keep highest" or "dl" for "drop lowest"
    n: int, the number of die either kept or discarded, depending on mode

    Returns a new die class object.
    '''
    keep, side = _parse_mode(mode)
    drop_amount = n
    if keep:
        # keeping the n highest is dropping the rest from the low end
        drop_amount = count - n
        side = DropType.LOW if side is DropType.HIGH else DropType.HIGH
    out = new_drop(faces, count, drop_amount, side)
    if ' ' in mode:
        name = f'{count}d{faces} {mode} {n}'
    else:
        name = f'{count}d{faces}{mode}{n}'
    return die.from_probabilities(out, name)

conditions = {x.value: x for x in ExplodingCondition}

def explode(faces: int, relation: str, threshold: int, explosion: die|int) -> die:
    '''
    Returns the distribution of rolling a die with the given number of faces and,
    if (roll relation threshold) holds, rolling explosion once and adding it on.
    faces: An int
    relation: One of '<', '<=', '==', '>=', '>'
    threshold: An int
    explosion: A die class object, or an int n as shorthand for die.new(n)
    Ex: explode(6, '==', 6, 6) is a d6 that rolls another d6 on a 6.
    '''
    if relation not in conditions:
        raise ValueError(f"relation must be one of {', '.join(conditions)}")
    if not isinstance(explosion, die):
        explosion = die.new(explosion)
    return new_exploding(faces, threshold, conditions[relation], explosion)
