"""
Advisor — maps aggregated statistics to one recommendation.

Pattern checks run in a fixed priority order and the first match wins.
Below the variant's minimum sample size the answer is always "waiting for
more data" at Low confidence.  Both the detailed and the simplified view
show the same recommendation; only the surrounding data differs.
"""

from dataclasses import dataclass, field, asdict
from enum import IntEnum
from typing import List, Optional

from config import (
    DOZENS,
    STREET_PICKS_ABSENT_12, STREET_PICKS_ABSENT_10,
    COLOR_STREAK_TRIGGER, DOZEN_HEAVY_TRIGGER, DOZEN_LIGHT_TRIGGER,
    COLOR_DOMINANCE_TRIGGER, COLD_NUMBER_PICKS,
)
from spinboard.analysis.street_analyzer import street_label

WAITING_DECISION = "Waiting for more data..."


class ConfidenceTier(IntEnum):
    LOW = 1
    LOW_TO_MEDIUM = 2
    MEDIUM = 3
    MEDIUM_TO_HIGH = 4
    HIGH = 5

    @property
    def label(self):
        return {
            ConfidenceTier.LOW: 'Low',
            ConfidenceTier.LOW_TO_MEDIUM: 'Low to Medium',
            ConfidenceTier.MEDIUM: 'Medium',
            ConfidenceTier.MEDIUM_TO_HIGH: 'Medium to High',
            ConfidenceTier.HIGH: 'High',
        }[self]


@dataclass(frozen=True)
class Recommendation:
    decision: str
    confidence: ConfidenceTier
    reason: str = ''
    bet_type: Optional[str] = None          # 'street', 'color', 'dozen', 'straight'
    targets: List[str] = field(default_factory=list)

    @property
    def needs_more_data(self):
        return self.decision == WAITING_DECISION

    def to_dict(self):
        data = asdict(self)
        data['confidence'] = self.confidence.label
        data['needs_more_data'] = self.needs_more_data
        return data


def _waiting(total_spins, min_spins):
    return Recommendation(
        decision=WAITING_DECISION,
        confidence=ConfidenceTier.LOW,
        reason=f"Need at least {min_spins} spins for a recommendation ({total_spins} so far)",
    )


def _opposite(color):
    return 'black' if color == 'red' else 'red'


# ═══════════════════════════════════════════════════════════════
# Street advisor (European)
# ═══════════════════════════════════════════════════════════════

def recommend_streets(analysis, total_spins, min_spins):
    if total_spins < min_spins:
        return _waiting(total_spins, min_spins)

    absent_12 = analysis['streets_not_in_last_12']
    if absent_12:
        picks = absent_12[:STREET_PICKS_ABSENT_12]
        return Recommendation(
            decision="Bet on streets: " + ", ".join(str(s['street_number']) for s in picks),
            confidence=ConfidenceTier.MEDIUM,
            reason="These streets haven't appeared in the last 12 spins",
            bet_type='street',
            targets=[str(s['street_number']) for s in picks],
        )

    absent_10 = analysis['streets_not_in_last_10']
    if absent_10:
        picks = absent_10[:STREET_PICKS_ABSENT_10]
        return Recommendation(
            decision="Bet on streets: " + ", ".join(str(s['street_number']) for s in picks),
            confidence=ConfidenceTier.LOW_TO_MEDIUM,
            reason="These streets haven't appeared in the last 10 spins",
            bet_type='street',
            targets=[str(s['street_number']) for s in picks],
        )

    return Recommendation(
        decision="No strong street recommendation",
        confidence=ConfidenceTier.LOW,
        reason="All streets have appeared recently",
    )


def street_commentary(analysis, total_spins, min_spins):
    """Long-form street notes for the detailed view."""
    if total_spins < min_spins:
        return f"Need more spins for reliable street predictions (at least {min_spins})"

    parts = []
    absent_12 = analysis['streets_not_in_last_12']
    if absent_12:
        parts.append(
            "Consider betting on these streets that haven't appeared in the last 12 spins: "
            + ", ".join(street_label(s) for s in absent_12) + "."
        )

    multiple = analysis['streets_multiple_in_last_12']
    if multiple:
        parts.append(
            "These streets have appeared multiple times in the last 12 spins "
            "and might be less likely to appear soon: "
            + ", ".join(f"{street_label(s)} - {s['appearances_in_last_12']} times" for s in multiple)
            + "."
        )

    if not parts:
        return ("No strong street patterns detected. Consider betting on streets "
                "that haven't appeared in the last 10 spins.")
    return " ".join(parts)


# ═══════════════════════════════════════════════════════════════
# Hot/cold advisor (American)
# ═══════════════════════════════════════════════════════════════

def _window_tallies(recent, variant):
    colors = {'red': 0, 'black': 0}
    dozens = {name: 0 for name in DOZENS}
    for label in recent:
        pocket = variant.table[label]
        if pocket.color in colors:
            colors[pocket.color] += 1
        if pocket.dozen in dozens:
            dozens[pocket.dozen] += 1
    return colors, dozens


def recommend_hot_cold(stats, total_spins, min_spins, variant):
    """stats needs 'streaks', 'recent' (last 12 labels) and 'cold_numbers'."""
    if total_spins < min_spins:
        return _waiting(total_spins, min_spins)

    color_run = stats['streaks']['color']
    if color_run['value'] and color_run['count'] >= COLOR_STREAK_TRIGGER:
        target = _opposite(color_run['value'])
        return Recommendation(
            decision=f"Bet on {target}",
            confidence=ConfidenceTier.MEDIUM_TO_HIGH,
            reason=f"{color_run['value'].capitalize()} has hit {color_run['count']} times in a row",
            bet_type='color',
            targets=[target],
        )

    colors, dozens = _window_tallies(stats['recent'], variant)
    window = len(stats['recent'])

    heavy = [name for name, c in dozens.items() if c >= DOZEN_HEAVY_TRIGGER]
    if heavy:
        light = [name for name, c in dozens.items()
                 if c <= DOZEN_LIGHT_TRIGGER and name not in heavy]
        if light:
            target = min(light, key=lambda name: dozens[name])
            return Recommendation(
                decision=f"Bet on the {target} dozen",
                confidence=ConfidenceTier.MEDIUM,
                reason=(f"The {heavy[0]} dozen hit {dozens[heavy[0]]} of the last {window} spins "
                        f"while the {target} dozen hit only {dozens[target]}"),
                bet_type='dozen',
                targets=[target],
            )

    for color in ('red', 'black'):
        if colors[color] >= COLOR_DOMINANCE_TRIGGER:
            target = _opposite(color)
            return Recommendation(
                decision=f"Bet on {target}",
                confidence=ConfidenceTier.MEDIUM,
                reason=f"{color.capitalize()} hit {colors[color]} of the last {window} spins",
                bet_type='color',
                targets=[target],
            )

    cold = list(stats['cold_numbers'])[:COLD_NUMBER_PICKS]
    if cold:
        return Recommendation(
            decision="Consider cold numbers: " + ", ".join(cold),
            confidence=ConfidenceTier.LOW_TO_MEDIUM,
            reason="These numbers are running well below their expected frequency",
            bet_type='straight',
            targets=cold,
        )

    return Recommendation(
        decision="No strong recommendation",
        confidence=ConfidenceTier.LOW,
        reason="No color, dozen or cold-number pattern stands out",
    )


def recommend(stats, total_spins, variant):
    """Dispatch to the variant's advisor."""
    if variant.advisor == 'street':
        return recommend_streets(stats['streets'], total_spins, variant.min_spins)
    return recommend_hot_cold(stats, total_spins, variant.min_spins, variant)
