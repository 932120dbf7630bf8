'''
Formatting settings for the text output of distributions.
Change these to adjust the histogram printed by dice.results() and the summary
printed by dice.details().
'''

# width of the label column in the summary, ie "Standard Deviation  "
NAME_FORMAT = 20
# width of each number column
NUMBER_FORMAT = 10
# digits after the decimal point
DECIMAL_FORMAT = 3
# a chance of 1.0 gets a bar this many characters long
BAR_LENGTH = 50

detail_labels = (
    'Min',
    'Max',
    'Mean',
    'Variance',
    'Standard Deviation',
)

detail_line = '{label:<' + str(NAME_FORMAT) + '}{number:>' + str(NUMBER_FORMAT) + \
    '.' + str(DECIMAL_FORMAT) + 'f}'
