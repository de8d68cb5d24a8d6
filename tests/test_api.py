"""
HTTP and SocketIO Integration Tests
Tests the full flow through the Flask app: record spins → read state →
role-filtered views → reset, over both the JSON API and SocketIO events.

Uses Flask's test client and Flask-SocketIO's test client (threading mode)
instead of a live server.
"""
import pytest
import sys
import os

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..')
sys.path.insert(0, PROJECT_ROOT)

from config import ROLE_HEADER, ADMIN_ROLE
from spinboard import create_app, socketio
from spinboard import routes

ADMIN_HEADERS = {ROLE_HEADER: ADMIN_ROLE}
USER_HEADERS = {ROLE_HEADER: 'user'}

NO_STREET_ONE = ['4', '5', '7', '10', '13', '16', '19', '22', '25', '28', '31', '34']


@pytest.fixture(scope='module')
def app():
    return create_app(async_mode='threading', testing=True)


@pytest.fixture
def client(app):
    return app.test_client()


def _events(sio_client, name):
    return [e['args'][0] for e in sio_client.get_received() if e['name'] == name]


# ═══════════════════════════════════════════════════════════════
# HTTP API
# ═══════════════════════════════════════════════════════════════

class TestHttpApi:
    def test_health(self, client):
        resp = client.get('/health')
        assert resp.status_code == 200
        assert resp.get_json()['status'] == 'ok'

    def test_variants(self, client):
        data = client.get('/api/variants').get_json()
        names = [v['name'] for v in data['variants']]
        assert names == ['european', 'american']
        assert data['variants'][1]['pockets'][:2] == ['0', '00']

    def test_initial_state(self, client):
        data = client.get('/api/state').get_json()
        assert data['total_spins'] == 0
        assert data['variant'] == 'european'
        assert data['recommendation']['needs_more_data'] is True
        assert data['recommendation']['confidence'] == 'Low'

    def test_record_spin(self, client):
        resp = client.post('/api/spins', json={'pocket': '17'})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['total_spins'] == 1
        assert data['recent'] == ['17']

    def test_state_persists_per_client(self, app, client):
        client.post('/api/spins', json={'pocket': '1'})
        client.post('/api/spins', json={'pocket': 2})
        assert client.get('/api/state').get_json()['total_spins'] == 2
        other = app.test_client()
        assert other.get('/api/state').get_json()['total_spins'] == 0

    def test_invalid_pocket(self, client):
        resp = client.post('/api/spins', json={'pocket': '00'})
        assert resp.status_code == 400
        assert 'error' in resp.get_json()
        assert client.get('/api/state').get_json()['total_spins'] == 0

    def test_missing_pocket(self, client):
        resp = client.post('/api/spins', json={})
        assert resp.status_code == 400

    def test_non_object_body(self, client):
        resp = client.post('/api/spins', json=['pocket'])
        assert resp.status_code == 400
        resp = client.post('/api/spins', json='17')
        assert resp.status_code == 400

    def test_cookieless_clients_do_not_grow_store(self, app, monkeypatch):
        monkeypatch.setattr(routes.http_sessions, 'max_sessions', 5)
        for _ in range(50):
            app.test_client().get('/api/state')
        assert len(routes.http_sessions.sessions) <= 5

    def test_active_client_survives_eviction(self, app, client, monkeypatch):
        monkeypatch.setattr(routes.http_sessions, 'max_sessions', 3)
        client.post('/api/spins', json={'pocket': '17'})
        for _ in range(10):
            app.test_client().get('/api/state')
            assert client.get('/api/state').get_json()['total_spins'] == 1

    def test_unknown_variant(self, client):
        resp = client.get('/api/state?variant=french')
        assert resp.status_code == 400
        assert 'european' in resp.get_json()['variants']

    def test_switch_variant(self, client):
        client.post('/api/spins', json={'pocket': '5'})
        data = client.post('/api/spins?variant=american', json={'pocket': '00'}).get_json()
        assert data['variant'] == 'american'
        assert data['total_spins'] == 1

    def test_user_view_is_simplified(self, client):
        for p in NO_STREET_ONE:
            client.post('/api/spins', json={'pocket': p}, headers=USER_HEADERS)
        data = client.get('/api/state', headers=USER_HEADERS).get_json()
        assert data['detailed'] is False
        assert data['recommendation']['decision'] == 'Bet on streets: 1'
        assert 'basic_stats' not in data
        assert 'pocket_stats' not in data

    def test_admin_view_is_detailed(self, client):
        for p in NO_STREET_ONE:
            client.post('/api/spins', json={'pocket': p})
        user = client.get('/api/state').get_json()
        admin = client.get('/api/state', headers=ADMIN_HEADERS).get_json()
        assert admin['detailed'] is True
        assert admin['recommendation'] == user['recommendation']
        assert len(admin['pocket_stats']) == 37
        assert len(admin['streets']['all_street_stats']) == 12
        assert admin['basic_stats']['red'] + admin['basic_stats']['black'] == 100.0

    def test_reset(self, client):
        client.post('/api/spins', json={'pocket': '3'})
        data = client.post('/api/reset', headers=ADMIN_HEADERS).get_json()
        assert data['total_spins'] == 0
        assert all(v == 0 for v in data['basic_stats'].values())
        assert data['recommendation']['needs_more_data'] is True


# ═══════════════════════════════════════════════════════════════
# SocketIO events
# ═══════════════════════════════════════════════════════════════

class TestSocketIO:
    def test_connect_sends_state(self, app):
        sio = socketio.test_client(app)
        connected = _events(sio, 'connected')
        assert len(connected) == 1
        assert connected[0]['state']['total_spins'] == 0
        sio.disconnect()

    def test_record_spin(self, app):
        sio = socketio.test_client(app)
        sio.get_received()
        sio.emit('record_spin', {'pocket': '32'})
        recorded = _events(sio, 'spin_recorded')
        assert recorded[0]['pocket'] == '32'
        assert recorded[0]['color'] == 'red'
        assert recorded[0]['state']['total_spins'] == 1
        sio.disconnect()

    def test_record_spin_is_logged(self, app, capsys):
        sio = socketio.test_client(app)
        sio.emit('record_spin', {'pocket': 7})
        assert '[Spin]' in capsys.readouterr().out
        sio.disconnect()

    def test_invalid_spin_emits_error(self, app):
        sio = socketio.test_client(app)
        sio.get_received()
        sio.emit('record_spin', {'pocket': '37'})
        errors = _events(sio, 'error')
        assert len(errors) == 1
        assert 'Invalid pocket' in errors[0]['message']
        sio.emit('get_state')
        assert _events(sio, 'state')[0]['total_spins'] == 0
        sio.disconnect()

    def test_clients_are_isolated(self, app):
        first = socketio.test_client(app)
        second = socketio.test_client(app)
        first.emit('record_spin', {'pocket': '1'})
        second.get_received()
        second.emit('get_state')
        assert _events(second, 'state')[0]['total_spins'] == 0
        first.disconnect()
        second.disconnect()

    def test_import_spins(self, app):
        sio = socketio.test_client(app, headers=ADMIN_HEADERS)
        sio.get_received()
        sio.emit('import_spins', {'text': ', '.join(NO_STREET_ONE)})
        done = _events(sio, 'import_complete')
        assert done[0]['imported'] == 12
        state = done[0]['state']
        assert state['detailed'] is True
        assert state['recommendation']['decision'] == 'Bet on streets: 1'
        assert 'commentary' in state
        sio.disconnect()

    def test_import_rejects_whole_batch(self, app):
        sio = socketio.test_client(app)
        sio.get_received()
        sio.emit('import_spins', {'text': '1\n2\nx'})
        assert len(_events(sio, 'error')) == 1
        sio.emit('get_state')
        assert _events(sio, 'state')[0]['total_spins'] == 0
        sio.disconnect()

    def test_non_object_payload_emits_error(self, app):
        sio = socketio.test_client(app)
        sio.get_received()
        sio.emit('record_spin', '17')
        sio.emit('select_variant', 'american')
        sio.emit('import_spins', ['1', '2'])
        sio.emit('import_spins', {'text': 5})
        assert len(_events(sio, 'error')) == 4
        sio.emit('get_state')
        state = _events(sio, 'state')[0]
        assert state['total_spins'] == 0
        assert state['variant'] == 'european'
        sio.disconnect()

    def test_select_variant(self, app):
        sio = socketio.test_client(app)
        sio.get_received()
        sio.emit('select_variant', {'variant': 'american'})
        assert _events(sio, 'state')[0]['variant'] == 'american'
        sio.emit('record_spin', {'pocket': '00'})
        assert _events(sio, 'spin_recorded')[0]['color'] == 'green'
        sio.emit('select_variant', {'variant': 'french'})
        assert len(_events(sio, 'error')) == 1
        sio.disconnect()

    def test_reset(self, app):
        sio = socketio.test_client(app)
        sio.emit('record_spin', {'pocket': '1'})
        sio.get_received()
        sio.emit('reset')
        done = _events(sio, 'reset_complete')
        assert done[0]['state']['total_spins'] == 0
        sio.disconnect()
