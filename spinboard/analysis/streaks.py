"""
Streak Tracker — current run on the color, odd/even and dozen axes.

A zero pocket belongs to none of red/black, odd/even or a dozen, so it
drops every axis back to the empty baseline.  The next non-zero spin
starts a fresh run of 1.
"""

AXES = ('color', 'odd_even', 'dozen')


def _axis_values(pocket):
    return {
        'color': pocket.color,
        'odd_even': pocket.parity,
        'dozen': pocket.dozen,
    }


class StreakTracker:
    """Keeps (value, count) per axis, updated one spin at a time."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.state = {axis: {'value': None, 'count': 0} for axis in AXES}

    def update(self, pocket):
        """Advance every axis with a Pocket."""
        if pocket.is_zero:
            self.reset()
            return

        for axis, value in _axis_values(pocket).items():
            current = self.state[axis]
            if current['value'] == value:
                current['count'] += 1
            else:
                self.state[axis] = {'value': value, 'count': 1}

    def get(self, axis):
        return dict(self.state[axis])

    def get_state(self):
        return {axis: dict(run) for axis, run in self.state.items()}
