"""
Session Manager - In-memory tracker per client session.

Nothing is written to disk: a tracker lives as long as its session and is
dropped when the session ends.  A manager built with ``max_sessions`` or
``idle_seconds`` also drops the least recently used sessions, so clients
that never come back cannot grow the store without bound.
"""

import time
import uuid
from collections import OrderedDict
from datetime import datetime

from config import DEFAULT_VARIANT
from spinboard.analysis.tracker import RouletteTracker


class SessionManager:
    def __init__(self, default_variant=DEFAULT_VARIANT, max_sessions=None,
                 idle_seconds=None, clock=time.monotonic):
        self.default_variant = default_variant
        self.max_sessions = max_sessions
        self.idle_seconds = idle_seconds
        self.clock = clock
        # Least recently used first
        self.sessions = OrderedDict()

    @staticmethod
    def new_session_id():
        return uuid.uuid4().hex

    def create_session(self, session_id=None, variant=None):
        """Start (or restart) a session with an empty tracker."""
        session_id = session_id or self.new_session_id()
        self.sessions.pop(session_id, None)
        self.prune(reserve=1)
        self.sessions[session_id] = {
            'id': session_id,
            'created_at': datetime.now().isoformat(),
            'last_seen': self.clock(),
            'tracker': RouletteTracker(variant or self.default_variant),
        }
        return session_id

    def get_tracker(self, session_id):
        """Tracker for session_id, creating the session on first use."""
        session = self.sessions.get(session_id)
        if session is None:
            self.create_session(session_id)
            return self.sessions[session_id]['tracker']

        session['last_seen'] = self.clock()
        self.sessions.move_to_end(session_id)
        return session['tracker']

    def switch_variant(self, session_id, variant):
        """Replace the session's tracker with an empty one for another wheel."""
        tracker = RouletteTracker(variant)
        self.get_tracker(session_id)
        self.sessions[session_id]['tracker'] = tracker
        return tracker

    def end_session(self, session_id):
        session = self.sessions.pop(session_id, None)
        return session['id'] if session else None

    def prune(self, reserve=0):
        """Drop idle sessions, then the oldest ones beyond max_sessions.

        ``reserve`` leaves room for sessions about to be created.
        """
        evicted = []
        if self.idle_seconds is not None:
            cutoff = self.clock() - self.idle_seconds
            while self.sessions:
                oldest_id, oldest = next(iter(self.sessions.items()))
                if oldest['last_seen'] > cutoff:
                    break
                self.sessions.popitem(last=False)
                evicted.append(oldest_id)

        if self.max_sessions is not None:
            while self.sessions and len(self.sessions) > self.max_sessions - reserve:
                oldest_id, _ = self.sessions.popitem(last=False)
                evicted.append(oldest_id)

        if evicted:
            print(f"[Session] Evicted {len(evicted)} sessions, {len(self.sessions)} active")
        return evicted
