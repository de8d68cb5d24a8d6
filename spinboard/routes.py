"""
HTTP Routes - Health check and JSON API over the per-session tracker.
"""

from flask import Blueprint, jsonify, request, session

from config import MAX_HTTP_SESSIONS, SESSION_IDLE_SECONDS
from spinboard.analysis.pockets import VARIANTS, InvalidPocketError, UnknownVariantError
from spinboard.roles import is_detailed_view
from spinboard.session.session_manager import SessionManager

main_bp = Blueprint('main', __name__)

# Cookie-less clients open a new session per request, so the store is capped
http_sessions = SessionManager(max_sessions=MAX_HTTP_SESSIONS,
                               idle_seconds=SESSION_IDLE_SECONDS)


def _session_id():
    if 'sid' not in session:
        session['sid'] = SessionManager.new_session_id()
    return session['sid']


def _tracker():
    """Current client's tracker, switched to ?variant= when one is given."""
    sid = _session_id()
    tracker = http_sessions.get_tracker(sid)
    variant = request.args.get('variant')
    if variant and variant.strip().lower() != tracker.variant.name:
        tracker = http_sessions.switch_variant(sid, variant)
        print(f"[Variant] HTTP session switched to {tracker.variant.name}")
    return tracker


def _view(tracker):
    return jsonify(tracker.get_view(detailed=is_detailed_view(request.headers)))


@main_bp.errorhandler(InvalidPocketError)
def handle_invalid_pocket(error):
    return jsonify({'error': str(error)}), 400


@main_bp.errorhandler(UnknownVariantError)
def handle_unknown_variant(error):
    return jsonify({'error': f"Unknown variant {error.args[0]!r}",
                    'variants': list(VARIANTS)}), 400


@main_bp.route('/health')
def health():
    return jsonify({'status': 'ok', 'service': 'Spinboard Roulette Tracker'})


@main_bp.route('/api/variants')
def variants():
    return jsonify({
        'variants': [
            {'name': v.name, 'title': v.title, 'pockets': list(v.labels),
             'min_spins': v.min_spins}
            for v in VARIANTS.values()
        ]
    })


@main_bp.route('/api/state')
def state():
    return _view(_tracker())


@main_bp.route('/api/spins', methods=['POST'])
def record_spin():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'pocket' not in data:
        return jsonify({'error': 'Missing "pocket" in request body.'}), 400

    tracker = _tracker()
    tracker.record_spin(data['pocket'])
    return _view(tracker)


@main_bp.route('/api/reset', methods=['POST'])
def reset():
    tracker = _tracker()
    tracker.reset()
    print("[Reset] HTTP session cleared")
    return _view(tracker)
