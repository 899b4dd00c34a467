from flask import Blueprint, current_app, jsonify, request

from songyear import socketio
from songyear.errors import (
    EmptyPoolError,
    GuessRejected,
    InvalidGuessInput,
    SessionNotFound,
    UpstreamUnavailable,
)
from songyear.services.game import parse_year_guess

sessions = Blueprint('sessions', __name__)


def _engine():
    return current_app.extensions['round_engine']


def _emit_update(code: str) -> None:
    socketio.emit('state_update', {'session_code': code}, to=f"session:{code}", namespace='/ws')


@sessions.errorhandler(SessionNotFound)
def _session_not_found(exc):
    return jsonify({'error': str(exc)}), 404


@sessions.route('/create', methods=['POST'])
def create_session():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'error': 'term must be a non-empty string'}), 400
    term = data.get('term')
    if term is not None and (not isinstance(term, str) or not term.strip()):
        return jsonify({'error': 'term must be a non-empty string'}), 400
    session = _engine().create_session(term.strip() if term else None)
    return jsonify({
        'message': 'New session created!',
        'session_code': session.code,
        'state': session.to_dict(),
    }), 201


@sessions.route('/<string:code>/state', methods=['GET'])
def get_state(code):
    return jsonify(_engine().get_session(code).to_dict())


@sessions.route('/<string:code>/round', methods=['POST'])
def next_round(code):
    engine = _engine()
    try:
        session = engine.next_round(code)
    except UpstreamUnavailable as exc:
        current_app.logger.warning(f"[round] session={code.upper()} upstream unavailable: {exc}")
        _emit_update(code.upper())
        return jsonify({
            'error': str(exc),
            'retryable': True,
            'state': engine.get_session(code).to_dict(),
        }), 502
    except EmptyPoolError as exc:
        current_app.logger.warning(f"[round] session={code.upper()} empty pool: {exc}")
        _emit_update(code.upper())
        return jsonify({
            'error': str(exc),
            'retryable': True,
            'state': engine.get_session(code).to_dict(),
        }), 503
    _emit_update(session.code)
    return jsonify(session.to_dict())


@sessions.route('/<string:code>/guess', methods=['POST'])
def submit_guess(code):
    data = request.get_json(silent=True)
    engine = _engine()
    # 404 before input validation so unknown sessions are reported as such
    engine.get_session(code)
    try:
        year = parse_year_guess(data.get('year') if isinstance(data, dict) else None)
    except InvalidGuessInput as exc:
        return jsonify({'error': str(exc)}), 400
    try:
        session = engine.guess(code, year)
    except GuessRejected as exc:
        return jsonify({'error': str(exc), 'state': engine.get_session(code).to_dict()}), 409
    _emit_update(session.code)
    return jsonify({'score': session.last_round_score, 'state': session.to_dict()})


@sessions.route('/<string:code>', methods=['DELETE'])
def end_session(code):
    _engine().end_session(code)
    socketio.emit('session_ended', {'session_code': code.upper()}, to=f"session:{code.upper()}", namespace='/ws')
    return jsonify({'message': 'Session ended'})
