"""
Flask REST API for the PadCalc Web Portal
Runs one calculator engine per browser session behind JSON endpoints
"""
import os
import sys
import threading
import uuid
from collections import OrderedDict

from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS

import config
from calculator import Calculator
from tokens import UnknownTokenError


def find_web_dir(base_dir=None):
    """Locate the keypad page: beside the source, else where the wheel installs it"""
    base_dir = base_dir or os.path.dirname(os.path.abspath(__file__))
    local = os.path.join(base_dir, 'web')
    if os.path.isdir(local):
        return local
    return os.path.join(sys.prefix, 'share', 'padcalc', 'web')


WEB_DIR = find_web_dir()


def _json_object():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


class CollectingNotifier:
    """Keeps alerts raised while a token is processed so the response can carry them"""

    def __init__(self):
        self.messages = []

    def alert(self, message):
        self.messages.append(message)

    def drain(self):
        messages, self.messages = self.messages, []
        return messages


class Session:
    def __init__(self):
        self.notifier = CollectingNotifier()
        self.calculator = Calculator(notifier=self.notifier)
        # Flask may serve requests from several threads; one writer per engine
        self.lock = threading.Lock()


class SessionStore:
    """Bounded table of sessions, evicting the least recently used"""

    def __init__(self, max_sessions=config.MAX_SESSIONS):
        self.max_sessions = max_sessions
        self._sessions = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id):
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = Session()
                self._sessions[session_id] = session
                while len(self._sessions) > self.max_sessions:
                    self._sessions.popitem(last=False)
            else:
                self._sessions.move_to_end(session_id)
            return session

    def __len__(self):
        with self._lock:
            return len(self._sessions)


def _state_dict(calculator):
    state = calculator.state
    return {
        'current_operand': state.current_operand,
        'previous_operand': state.previous_operand,
        'operation': state.operation.value if state.operation else None,
        'reset_on_next_digit': state.reset_on_next_digit,
    }


def create_app(max_sessions=config.MAX_SESSIONS):
    app = Flask(__name__, static_folder=WEB_DIR, static_url_path='')
    CORS(app)  # Enable CORS for all routes
    app.logger.setLevel(config.LOG_LEVEL)

    sessions = SessionStore(max_sessions)
    app.extensions['padcalc_sessions'] = sessions

    def _session_id(payload=None):
        session_id = (payload or {}).get('session') or request.args.get('session')
        return str(session_id) if session_id else None

    @app.route('/')
    def index():
        """Serve the web keypad"""
        return send_from_directory(WEB_DIR, 'index.html')

    @app.route('/api')
    def api_info():
        """API information page"""
        return """
        <html>
        <head><title>PadCalc API</title></head>
        <body style="font-family: Arial; padding: 40px; background: #1a1a2e; color: white;">
            <h1>PadCalc API Server</h1>
            <p>API is running! Open the keypad at <a href="/" style="color: #4CAF50;">Home</a></p>
            <h2>Available Endpoints:</h2>
            <ul>
                <li>GET /api/session - Start a new calculator session</li>
                <li>GET /api/display?session=&lt;id&gt; - Current display and state</li>
                <li>POST /api/press - Press one button: {"session": id, "token": "7"}</li>
                <li>POST /api/reset - Clear a session: {"session": id}</li>
            </ul>
        </body>
        </html>
        """

    @app.route('/api/session')
    def new_session():
        """Hand out a fresh session id"""
        session_id = uuid.uuid4().hex
        session = sessions.get(session_id)
        return jsonify({
            'success': True,
            'data': {
                'session': session_id,
                'display': session.calculator.current_operand,
            }
        })

    @app.route('/api/display')
    def get_display():
        """Get the display text and engine state of a session"""
        session_id = _session_id()
        if not session_id:
            return jsonify({'success': False, 'error': 'Missing session id'}), 400

        session = sessions.get(session_id)
        with session.lock:
            return jsonify({
                'success': True,
                'data': {
                    'display': session.calculator.current_operand,
                    'state': _state_dict(session.calculator),
                }
            })

    @app.route('/api/press', methods=['POST'])
    def press():
        """Process one button token"""
        payload = _json_object()
        session_id = _session_id(payload)
        token = payload.get('token')
        if not session_id:
            return jsonify({'success': False, 'error': 'Missing session id'}), 400
        if not isinstance(token, str):
            return jsonify({'success': False, 'error': 'Missing token'}), 400

        session = sessions.get(session_id)
        with session.lock:
            try:
                display = session.calculator.handle_input(token)
            except UnknownTokenError as e:
                app.logger.info("Rejected token %r for session %s", token, session_id)
                return jsonify({'success': False, 'error': str(e)}), 400
            alerts = session.notifier.drain()
            for message in alerts:
                app.logger.warning("Session %s: %s", session_id, message)
            return jsonify({
                'success': True,
                'data': {
                    'display': display,
                    'state': _state_dict(session.calculator),
                    'alerts': alerts,
                }
            })

    @app.route('/api/reset', methods=['POST'])
    def reset():
        """Full clear of a session's calculator"""
        payload = _json_object()
        session_id = _session_id(payload)
        if not session_id:
            return jsonify({'success': False, 'error': 'Missing session id'}), 400

        session = sessions.get(session_id)
        with session.lock:
            display = session.calculator.handle_input('CE')
            return jsonify({
                'success': True,
                'data': {
                    'display': display,
                    'state': _state_dict(session.calculator),
                }
            })

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        code = getattr(e, 'code', None)
        if isinstance(code, int) and 400 <= code < 500:
            return jsonify({'success': False, 'error': str(e)}), code
        app.logger.exception("Unhandled error")
        return jsonify({'success': False, 'error': str(e)}), 500

    return app


app = create_app()


if __name__ == '__main__':
    print("\n" + "="*60)
    print("PadCalc Web Portal API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
