'''
Exact distributions of dice rolls and of anything built out of them.
This module collects the public API in one place, so
    from dice import d, results
    print(results(d(6) + d(6) + 3))
prints the histogram of 2d6+3, and
    f = plot(drop(4, 6, 'dl'))
    f.show()
gives a nice plot.
'''
from die import die
from probability import probability, Numeric
from drop import (DropType, drop_by_condition, new_drop, drop_from_range,
    drop_from_values, drop_from_probabilities)
from exploding import (ExplodingCondition, exploding_helper, new_exploding,
    exploding_from_range, exploding_from_values, exploding_from_probabilities)
from dice_functions import mean, var, sd, drop, explode
import dice_strings
import numpy as np
import logging

logger = logging.getLogger(__name__)

__all__ = ['d', 'results', 'details', 'plot', 'die', 'probability', 'Numeric',
           'DropType', 'drop_by_condition', 'new_drop', 'drop_from_range',
           'drop_from_values', 'drop_from_probabilities', 'ExplodingCondition',
           'exploding_helper', 'new_exploding', 'exploding_from_range',
           'exploding_from_values', 'exploding_from_probabilities', 'mean', 'var',
           'sd', 'drop', 'explode']

def d(sides: int) -> die:
    '''Wrapper function for die.new(sides)'''
    return die.new(sides)

def results(x: die) -> str:
    '''
    Returns a text histogram of x, one line per value:
    value : chance in percent : bar
    '''
    return '\n'.join(str(p) for p in x)

def details(x: die) -> str:
    '''Returns the min, max, mean, variance and standard deviation of x, one per line.'''
    numbers = (x.get_min(), x.get_max(), x.get_mean(), x.get_variance(),
               x.get_standard_deviation())
    return '\n'.join(
        dice_strings.detail_line.format(label=label, number=float(number))
        for label, number in zip(dice_strings.detail_labels, numbers)
    )

def plot(x: die, name: str|None = None) -> 'matplotlib.figure.Figure': # type: ignore
    '''
    Plots a distribution: the chance of each value as a stem plot, and the
    cumulative chance on a second axis.
    x: A die class object
    name (optional): A custom name for the plot, defaults to the name of x.
    Returns a matplotlib figure, call .show() or .savefig() on it.
    '''
    # matplotlib is slow to import and only needed here
    import matplotlib.pyplot as plt
    if name is None:
        name = str(x)
    values = np.array([float(v) for v in x.values()])
    y = np.array([float(c) for c in x.chances()])
    logger.debug('plotting %s with %d values', name, len(y))
    fig, ax = plt.subplots()
    ax.set_title('Distribution of ' + name)
    # For larger distributions, we plot differently to reduce clutter.
    threshold_small_heads = 100
    threshold_no_heads = 1000
    if len(y) < threshold_small_heads:
        ax.stem(values, y, label='Probability', basefmt='')
    elif len(y) < threshold_no_heads:
        ax.stem(values, y, label='Probability', markerfmt='.', basefmt='')
    else:
        ax.stem(values, y, label='Probability', markerfmt='', basefmt='')
    ax.tick_params(axis='y', labelcolor='tab:blue')
    ax2 = ax.twinx()
    ax2.set_ylim(-.05, 1.05)
    ax2.step(values, np.cumsum(y), where='post', color='tab:red', label='Cumulative')
    ax2.tick_params(axis='y', labelcolor='tab:red')
    fig.legend()
    return fig
