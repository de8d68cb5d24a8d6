"""
SocketIO Event Handlers - Real-time WebSocket events for the dashboard.
Handles spin input, variant selection, bulk import and reset.
"""

from flask_socketio import emit
from flask import request
from spinboard import socketio
from spinboard.analysis.pockets import InvalidPocketError, UnknownVariantError
from spinboard.roles import is_detailed_view
from spinboard.session.session_manager import SessionManager

# One tracker per connected client, keyed by SocketIO sid
session_mgr = SessionManager()

# Detailed-view permission per sid, read from the role header at connect
client_views = {}

print("[Startup] Spin tracker ready — sessions start empty")


def _view(sid):
    tracker = session_mgr.get_tracker(sid)
    return tracker.get_view(detailed=client_views.get(sid, False))


def _payload(data):
    """Event payload as a dict, or None after emitting an error."""
    if isinstance(data, dict):
        return data
    emit('error', {'message': 'Invalid payload: expected a JSON object.'})
    return None


def _parse_pockets(raw_text):
    """Split pocket labels from text (newline or comma separated)."""
    lines = raw_text.replace(',', '\n').split('\n')
    return [line.strip() for line in lines if line.strip()]


@socketio.on('connect')
def handle_connect():
    sid = request.sid
    client_views[sid] = is_detailed_view(request.headers)
    session_mgr.create_session(sid)
    emit('connected', {
        'message': 'Connected to Spinboard',
        'state': _view(sid),
    })


@socketio.on('disconnect')
def handle_disconnect(*args):
    sid = request.sid
    session_mgr.end_session(sid)
    client_views.pop(sid, None)


@socketio.on('select_variant')
def handle_select_variant(data):
    sid = request.sid
    data = _payload(data)
    if data is None:
        return
    name = data.get('variant', '')
    try:
        tracker = session_mgr.switch_variant(sid, name)
    except UnknownVariantError:
        emit('error', {'message': f'Unknown variant {name!r}.'})
        return

    print(f"[Variant] {sid} switched to {tracker.variant.name}")
    emit('state', _view(sid))


@socketio.on('record_spin')
def handle_record_spin(data):
    """Record one spin outcome and push the recomputed state."""
    sid = request.sid
    data = _payload(data)
    if data is None:
        return
    tracker = session_mgr.get_tracker(sid)
    pocket = data.get('pocket')

    try:
        tracker.record_spin(pocket)
    except InvalidPocketError:
        emit('error', {'message': f'Invalid pocket {pocket!r}. Valid: {", ".join(tracker.variant.labels)}.'})
        return

    label = tracker.history[-1]
    print(f"[Spin] {sid} recorded {label}")
    emit('spin_recorded', {
        'pocket': label,
        'color': tracker.variant.table[label].color,
        'state': _view(sid),
    })


@socketio.on('import_spins')
def handle_import_spins(data):
    """Append a batch of spins typed or pasted by the user."""
    sid = request.sid
    data = _payload(data)
    if data is None:
        return
    raw_text = data.get('text', '')
    if not isinstance(raw_text, str):
        emit('error', {'message': 'Import text must be a string.'})
        return

    tracker = session_mgr.get_tracker(sid)
    pockets = _parse_pockets(raw_text)

    if not pockets:
        emit('error', {'message': 'No data provided.'})
        return

    try:
        labels = tracker.record_spins(pockets)
    except InvalidPocketError as e:
        emit('error', {'message': f'Import rejected: {e}'})
        return

    print(f"[Import] {sid} added {len(labels)} spins")
    emit('import_complete', {
        'imported': len(labels),
        'state': _view(sid),
    })


@socketio.on('reset')
def handle_reset():
    sid = request.sid
    session_mgr.get_tracker(sid).reset()
    print(f"[Reset] {sid} cleared all spins")
    emit('reset_complete', {
        'message': 'All spins cleared. Fresh start.',
        'state': _view(sid),
    })


@socketio.on('get_state')
def handle_get_state():
    emit('state', _view(request.sid))
