"""
Basic distribution statistics: red/black/green, odd/even, low/high.
"""

from collections import Counter

STAT_KEYS = ('red', 'black', 'green', 'odd', 'even', 'low', 'high')


def empty_stats():
    return {key: 0 for key in STAT_KEYS}


def compute_basic_stats(history, variant):
    """Percentages (one decimal) of each outside-bet category.

    Zero pockets only count as green; they are neither odd/even nor
    low/high.  An empty history reports 0 everywhere.
    """
    total = len(history)
    if total == 0:
        return empty_stats()

    tally = Counter()
    for label in history:
        pocket = variant.table[label]
        tally[pocket.color] += 1
        if pocket.parity:
            tally[pocket.parity] += 1
        if pocket.height:
            tally[pocket.height] += 1

    return {key: round(tally[key] / total * 100, 1) for key in STAT_KEYS}
