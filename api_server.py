#!/usr/bin/env python3
"""Simple JSON API for resolving thumbnails and managing history."""

import os
import threading
import warnings

from dotenv import load_dotenv
from flask import Flask, request, jsonify

from thumbgrab.errors import ErrorKind
from thumbgrab.labels import SUPPORTED_LANGUAGES
from thumbgrab.session import SessionState

load_dotenv()
warnings.filterwarnings('ignore', message='urllib3 v2 only supports OpenSSL 1.1.1+')

app = Flask(__name__)

_session = None
_session_lock = threading.Lock()
_resolve_lock = threading.Lock()

ERROR_STATUS = {
    ErrorKind.UNRECOGNIZED_LINK: 400,
    ErrorKind.IDENTIFIER_NOT_FOUND: 400,
    ErrorKind.CREDENTIAL_MISSING: 503,
    ErrorKind.INFERENCE_UNAVAILABLE: 502,
    ErrorKind.INFERENCE_MALFORMED: 502,
    ErrorKind.INFERENCE_INCOMPLETE: 502,
}


def get_session() -> SessionState:
    """Load the session on first use. Concurrent first requests share one."""
    global _session
    with _session_lock:
        if _session is None:
            _session = SessionState.load()
        return _session


def set_session(session: SessionState) -> None:
    global _session
    with _session_lock:
        _session = session


def request_value(name: str):
    """Read a parameter from the JSON body, form, or query string."""
    if request.method == 'POST':
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            data = {}
        return data.get(name) or request.form.get(name)
    return request.args.get(name)


@app.route('/resolve', methods=['GET', 'POST'])
def resolve_endpoint():
    """Resolve a link. One resolution runs at a time."""
    url = request_value('url') or ''
    if not isinstance(url, str):
        return jsonify({'success': False, 'error': {
            'kind': 'invalid_request',
            'message': 'url must be a string',
        }}), 400

    session = get_session()

    with _resolve_lock:
        metadata, error = session.resolve_and_record(url)

    if error is None:
        return jsonify({'success': True, 'metadata': metadata.to_dict()})

    if error.is_silent:
        return jsonify({'success': False, 'error': None})

    return jsonify({
        'success': False,
        'error': error.to_dict(session.language),
    }), ERROR_STATUS.get(error.kind, 400)


@app.route('/history', methods=['GET'])
def history_endpoint():
    session = get_session()
    return jsonify([entry.to_dict() for entry in session.history])


@app.route('/history/clear', methods=['POST'])
def clear_history_endpoint():
    with _resolve_lock:
        get_session().history.clear()
    return jsonify({'success': True})


@app.route('/consent', methods=['GET', 'POST'])
def consent_endpoint():
    session = get_session()
    if request.method == 'POST':
        session.accept_cookies()
    return jsonify({'cookie_consent': session.cookie_consent})


@app.route('/language', methods=['GET', 'POST'])
def language_endpoint():
    session = get_session()
    if request.method == 'POST':
        code = request_value('language')
        if code not in SUPPORTED_LANGUAGES:
            return jsonify({
                'error': f"Unsupported language, expected one of {', '.join(SUPPORTED_LANGUAGES)}"
            }), 400
        session.set_language(code)
    return jsonify({'language': session.language})


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({'status': 'ok', 'api_ready': get_session().api_ready})


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=False)
