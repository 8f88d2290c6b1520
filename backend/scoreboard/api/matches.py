from flask import Blueprint, jsonify, request, current_app
from scoreboard import get_store
from scoreboard.services.board import IndexOutOfRange, InvalidArgument

matches = Blueprint('scoreboard', __name__)


def _param(name):
    # JSON body first, then query string (the original clients send query params)
    data = request.get_json(silent=True)
    if isinstance(data, dict) and name in data:
        return data.get(name)
    return request.args.get(name)


def _int_param(name):
    value = _param(name)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


@matches.errorhandler(InvalidArgument)
def handle_invalid_argument(exc):
    current_app.logger.warning(f"[rejected] {request.method} {request.path} reason={exc.message}")
    return jsonify({'error': exc.message}), 400


@matches.errorhandler(IndexOutOfRange)
def handle_index_out_of_range(exc):
    current_app.logger.warning(f"[rejected] {request.method} {request.path} position={exc.position}")
    return jsonify({'error': f'Invalid match index: {exc.position}'}), 400


@matches.route('/matches', methods=['POST'])
def start_match():
    home_team = _param('homeTeam')
    away_team = _param('awayTeam')
    if not all(isinstance(t, str) and t.strip() for t in (home_team, away_team)):
        return jsonify({'error': 'Team names must not be empty'}), 400

    position = get_store().start_match(home_team, away_team)
    return jsonify({
        'message': f'Match started: {home_team} vs {away_team}',
        'position': position,
    }), 201


@matches.route('/matches', methods=['GET'])
def list_matches():
    return jsonify([m.to_dict() for m in get_store().get_summary()])


@matches.route('/matches/<int(signed=True):position>/score', methods=['PUT'])
def update_score(position):
    home_score = _int_param('homeScore')
    away_score = _int_param('awayScore')
    if home_score is None or away_score is None:
        return jsonify({'error': 'homeScore and awayScore must be integers'}), 400

    get_store().update_score(position, home_score, away_score)
    return jsonify({'message': f'Score updated for match at index {position}'})


@matches.route('/matches/<int(signed=True):position>', methods=['DELETE'])
def finish_match(position):
    get_store().finish_match(position)
    return jsonify({'message': f'Match at index {position} finished.'})


@matches.route('/summary', methods=['GET'])
def get_summary():
    return jsonify(get_store().get_formatted_summary())


@matches.route('/reset', methods=['POST'])
def reset_scoreboard():
    get_store().reset()
    return jsonify({'message': 'Scoreboard has been reset.'})
