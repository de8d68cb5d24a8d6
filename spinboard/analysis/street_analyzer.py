"""
Street Analyzer — recurrence of the twelve streets in the last 10 / 12 spins.

Every occurrence in the window is tested against street membership on its
own, so a number seen twice counts twice for its street.  Zeros and any
non-numeric labels are dropped before matching.  Full rescan per call;
windows are at most 12 long.
"""

from config import STREETS, SHORT_WINDOW, LONG_WINDOW


def _window_numbers(history, size):
    numbers = []
    for label in history[-size:]:
        try:
            n = int(label)
        except (TypeError, ValueError):
            continue
        if n > 0:
            numbers.append(n)
    return numbers


def analyze_streets(history, short_history=None):
    """Return per-street window stats and their partitions.

    short_history, when given, is the last-10 window already cut by the
    caller; otherwise both windows are sliced from history.
    """
    history = list(history)
    if short_history is None:
        short_history = history
    last_short = _window_numbers(list(short_history), SHORT_WINDOW)
    last_long = _window_numbers(history, LONG_WINDOW)

    street_stats = []
    for index, street in enumerate(STREETS):
        appearances = sum(1 for n in last_long if n in street)
        street_stats.append({
            'street_number': index + 1,
            'numbers': list(street),
            'appeared_in_last_10': any(n in street for n in last_short),
            'appearances_in_last_12': appearances,
            'multiple_appearances': appearances >= 2,
            'exactly_once_in_last_12': appearances == 1,
        })

    return {
        'streets_not_in_last_12': [s for s in street_stats if s['appearances_in_last_12'] == 0],
        'streets_not_in_last_10': [s for s in street_stats if not s['appeared_in_last_10']],
        'streets_multiple_in_last_12': [s for s in street_stats if s['multiple_appearances']],
        'streets_once_in_last_12': [s for s in street_stats if s['exactly_once_in_last_12']],
        'all_street_stats': street_stats,
    }


def street_label(street):
    """'Street 4 (10-11-12)'"""
    return f"Street {street['street_number']} ({'-'.join(str(n) for n in street['numbers'])})"


def summarize(analysis):
    """Partition sizes for the simplified view."""
    return {
        'not_in_last_12': len(analysis['streets_not_in_last_12']),
        'not_in_last_10': len(analysis['streets_not_in_last_10']),
        'multiple_in_last_12': len(analysis['streets_multiple_in_last_12']),
        'once_in_last_12': len(analysis['streets_once_in_last_12']),
        'total_streets': len(analysis['all_street_stats']),
    }
