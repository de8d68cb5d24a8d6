"""
Configuration constants for the Spinboard roulette spin tracker.
Single source of truth for all tunable parameters.
"""

import os

# ─── Number Properties ───────────────────────────────────────────────
RED_NUMBERS = {1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36}

FIRST_DOZEN = set(range(1, 13))
SECOND_DOZEN = set(range(13, 25))
THIRD_DOZEN = set(range(25, 37))

# Dozen labels in table order; zeros fall in ZERO_GROUP
DOZENS = {
    '1st': FIRST_DOZEN,
    '2nd': SECOND_DOZEN,
    '3rd': THIRD_DOZEN,
}
ZERO_GROUP = 'zero'

LOW_NUMBERS = set(range(1, 19))

# Street i (1-12) covers {3i-2, 3i-1, 3i}
STREETS = [[3 * i - 2, 3 * i - 1, 3 * i] for i in range(1, 13)]

EUROPEAN_ZEROS = ['0']
AMERICAN_ZEROS = ['0', '00']

# ─── Windows ─────────────────────────────────────────────────────────
SHORT_WINDOW = 10                   # "last 10 spins"
LONG_WINDOW = 12                    # "last 12 spins"
RECENT_DISPLAY_COUNT = 12           # Numbers shown in the recent strip

# ─── Hot / Cold Classification ───────────────────────────────────────
HOT_COLD_MIN_SPINS = 10             # Flags stay off below this many spins
HOT_COLD_THRESHOLD_FACTOR = 0.5     # Band = expected × 0.5 either side

# ─── Advisor: Street (European) ──────────────────────────────────────
STREET_MIN_SPINS = 12
STREET_PICKS_ABSENT_12 = 3          # Max streets suggested when absent for 12
STREET_PICKS_ABSENT_10 = 2          # Max streets suggested when absent for 10

# ─── Advisor: Hot / Cold (American) ──────────────────────────────────
HOT_COLD_ADVISOR_MIN_SPINS = 20
COLOR_STREAK_TRIGGER = 5            # Same color N in a row → bet opposite
DOZEN_HEAVY_TRIGGER = 6             # Dozen seen ≥ N times in last 12 ...
DOZEN_LIGHT_TRIGGER = 2             # ... while another seen ≤ N times
COLOR_DOMINANCE_TRIGGER = 8         # Red or black ≥ N of last 12
COLD_NUMBER_PICKS = 3

# ─── View ────────────────────────────────────────────────────────────
STREET_BUCKET_LIMIT = 3             # Max streets in each best/consider/avoid list

# ─── Server Settings ─────────────────────────────────────────────────
HOST = os.environ.get('SPINBOARD_HOST', '0.0.0.0')
PORT = int(os.environ.get('SPINBOARD_PORT', '5050'))
DEBUG = os.environ.get('SPINBOARD_DEBUG', '0') == '1'
SECRET_KEY = os.environ.get('SPINBOARD_SECRET_KEY', 'spinboard-dev-key')
ASYNC_MODE = os.environ.get('SPINBOARD_ASYNC_MODE', 'eventlet')
DEFAULT_VARIANT = os.environ.get('SPINBOARD_VARIANT', 'european')

# Role claim injected by the upstream identity provider
ROLE_HEADER = os.environ.get('SPINBOARD_ROLE_HEADER', 'X-Spinboard-Role')
ADMIN_ROLE = 'admin'

# HTTP clients without a cookie each open a session; the store is bounded
MAX_HTTP_SESSIONS = int(os.environ.get('SPINBOARD_MAX_SESSIONS', '1000'))
SESSION_IDLE_SECONDS = int(os.environ.get('SPINBOARD_SESSION_IDLE_SECONDS', '3600'))
