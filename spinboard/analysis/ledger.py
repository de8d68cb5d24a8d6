"""
Spin Ledger — append-only record of spin outcomes with running counters.

Counts, dozen buckets, streaks and the short recent windows are kept up to
date on every record_spin() so reads never rescan the full history.  The
results match a full rescan of the history exactly.
"""

from collections import Counter, deque

from config import DOZENS, ZERO_GROUP, SHORT_WINDOW, LONG_WINDOW
from spinboard.analysis.streaks import StreakTracker


class SpinLedger:
    def __init__(self, variant):
        self.variant = variant
        self.history = []
        self.counts = Counter()
        self.dozen_counts = Counter()
        self.streaks = StreakTracker()
        self.last_short = deque(maxlen=SHORT_WINDOW)
        self.last_long = deque(maxlen=LONG_WINDOW)

    def __len__(self):
        return len(self.history)

    @property
    def total_spins(self):
        return len(self.history)

    def record_spin(self, pocket):
        """Append one outcome.  Raises InvalidPocketError before touching state."""
        info = self.variant.lookup(pocket)
        label = info.label

        self.history.append(label)
        self.counts[label] += 1
        self.dozen_counts[info.dozen] += 1
        self.streaks.update(info)
        self.last_short.append(label)
        self.last_long.append(label)
        return info

    def record_many(self, pockets):
        """Append several outcomes in order.  All are validated before any is recorded."""
        labels = [self.variant.normalize(p) for p in pockets]
        for label in labels:
            self.record_spin(label)
        return labels

    def reset(self):
        self.history = []
        self.counts = Counter()
        self.dozen_counts = Counter()
        self.streaks.reset()
        self.last_short.clear()
        self.last_long.clear()

    def count(self, pocket):
        return self.counts.get(self.variant.normalize(pocket), 0)

    def get_counts(self):
        """Count per pocket in table order, zeros included."""
        return {label: self.counts.get(label, 0) for label in self.variant.labels}

    def get_dozen_counts(self):
        result = {name: self.dozen_counts.get(name, 0) for name in DOZENS}
        result[ZERO_GROUP] = self.dozen_counts.get(ZERO_GROUP, 0)
        return result

    def recent(self, n):
        """Last n labels in chronological order."""
        if n <= 0:
            return []
        for window in (self.last_short, self.last_long):
            if n <= len(window):
                return list(window)[-n:]
        return self.history[-n:]
