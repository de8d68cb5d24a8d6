"""
Hot/Cold Classifier — flags pockets running above or below their expected
count given the number of spins so far.

expected  = total_spins / pocket_space
band      = expected × HOT_COLD_THRESHOLD_FACTOR
hot       = count > expected + band
cold      = count < expected − band

Recomputed from the current counts on every call; nothing is remembered
between evaluations.
"""

import numpy as np

from config import HOT_COLD_MIN_SPINS, HOT_COLD_THRESHOLD_FACTOR


def classify_hot_cold(counts, total_spins, pocket_space=38):
    """Classify every pocket in counts.

    Args:
        counts: mapping of pocket label → occurrence count.
        total_spins: ledger length.
        pocket_space: number of pockets on the wheel.

    Returns:
        dict label → {'is_hot': bool, 'is_cold': bool}
    """
    labels = list(counts)
    flags = {label: {'is_hot': False, 'is_cold': False} for label in labels}

    if total_spins < HOT_COLD_MIN_SPINS or not labels:
        return flags

    observed = np.array([counts[label] for label in labels], dtype=np.float64)
    expected = total_spins / pocket_space
    band = expected * HOT_COLD_THRESHOLD_FACTOR

    hot = observed > expected + band
    cold = observed < expected - band

    for i, label in enumerate(labels):
        flags[label] = {'is_hot': bool(hot[i]), 'is_cold': bool(cold[i])}

    return flags


def get_hot_numbers(flags):
    """Hot pocket labels in table order."""
    return [label for label, f in flags.items() if f['is_hot']]


def get_cold_numbers(flags):
    """Cold pocket labels in table order."""
    return [label for label, f in flags.items() if f['is_cold']]
