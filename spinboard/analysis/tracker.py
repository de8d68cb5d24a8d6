"""
Roulette Tracker — session facade over the ledger, aggregators and advisor.

One tracker per session.  record_spin() and reset() are the only mutators;
every get_*/analyze_*/recommend call recomputes from the current ledger and
returns fresh structures, so two calls with no spin in between are equal.
"""

from config import SHORT_WINDOW, LONG_WINDOW, RECENT_DISPLAY_COUNT, STREET_BUCKET_LIMIT
from spinboard.analysis.pockets import get_variant
from spinboard.analysis.ledger import SpinLedger
from spinboard.analysis.basic_stats import compute_basic_stats
from spinboard.analysis.hot_cold import classify_hot_cold, get_hot_numbers, get_cold_numbers
from spinboard.analysis.street_analyzer import analyze_streets, summarize
from spinboard.analysis import advisor


class RouletteTracker:
    def __init__(self, variant='european'):
        self.variant = get_variant(variant)
        self.ledger = SpinLedger(self.variant)

    @property
    def total_spins(self):
        return self.ledger.total_spins

    @property
    def history(self):
        return list(self.ledger.history)

    # ─── Mutators ────────────────────────────────────────────────────

    def record_spin(self, pocket):
        self.ledger.record_spin(pocket)

    def record_spins(self, pockets):
        return self.ledger.record_many(pockets)

    def reset(self):
        self.ledger.reset()

    # ─── Aggregates ──────────────────────────────────────────────────

    def get_basic_stats(self):
        return compute_basic_stats(self.ledger.history, self.variant)

    def get_hot_cold(self):
        return classify_hot_cold(self.ledger.get_counts(), self.total_spins,
                                 self.variant.pocket_space)

    def get_pocket_stats(self):
        """Per-pocket count, color and hot/cold flags in table order."""
        counts = self.ledger.get_counts()
        flags = classify_hot_cold(counts, self.total_spins, self.variant.pocket_space)
        return [
            {
                'number': label,
                'count': counts[label],
                'color': self.variant.table[label].color,
                'is_hot': flags[label]['is_hot'],
                'is_cold': flags[label]['is_cold'],
            }
            for label in self.variant.labels
        ]

    def get_streak_state(self):
        return self.ledger.streaks.get_state()

    def get_dozen_stats(self):
        return self.ledger.get_dozen_counts()

    def analyze_streets(self):
        return analyze_streets(self.ledger.recent(LONG_WINDOW),
                               self.ledger.recent(SHORT_WINDOW))

    def get_recent(self, n=RECENT_DISPLAY_COUNT):
        return self.ledger.recent(n)

    def recommend(self):
        if self.variant.advisor == 'street':
            stats = {'streets': self.analyze_streets()}
        else:
            stats = {
                'streaks': self.get_streak_state(),
                'recent': self.ledger.recent(LONG_WINDOW),
                'cold_numbers': get_cold_numbers(self.get_hot_cold()),
            }
        return advisor.recommend(stats, self.total_spins, self.variant)

    # ─── Views ───────────────────────────────────────────────────────

    def get_view(self, detailed=False):
        """Snapshot for a renderer.

        The simplified view carries the recommendation and light context;
        the detailed view adds the raw statistics behind it.
        """
        view = {
            'variant': self.variant.name,
            'variant_title': self.variant.title,
            'total_spins': self.total_spins,
            'recommendation': self.recommend().to_dict(),
            'recent': self.get_recent(),
            'detailed': bool(detailed),
        }

        streets = self.analyze_streets() if self.variant.has_streets else None
        if streets is not None:
            view['street_summary'] = summarize(streets)
            view.update(street_buckets(streets))

        if not detailed:
            return view

        flags = self.get_hot_cold()
        view.update({
            'basic_stats': self.get_basic_stats(),
            'pocket_stats': self.get_pocket_stats(),
            'hot_numbers': get_hot_numbers(flags),
            'cold_numbers': get_cold_numbers(flags),
            'streaks': self.get_streak_state(),
            'dozens': self.get_dozen_stats(),
        })
        if streets is not None:
            view['streets'] = streets
            view['commentary'] = advisor.street_commentary(
                streets, self.total_spins, self.variant.min_spins)
        return view


def _street_numbers(streets, limit=STREET_BUCKET_LIMIT):
    return [s['street_number'] for s in streets[:limit]]


def street_buckets(analysis):
    """Best, consider and avoid street lists for the simplified view.

    "Consider" falls back to streets absent from the last 10 only when no
    street is absent from the whole last 12.
    """
    not_in_12 = analysis['streets_not_in_last_12']
    consider = [] if not_in_12 else analysis['streets_not_in_last_10']
    return {
        'best_streets': _street_numbers(not_in_12),
        'consider_streets': _street_numbers(consider),
        'avoid_streets': _street_numbers(analysis['streets_multiple_in_last_12']),
    }
