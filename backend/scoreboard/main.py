from flask import Blueprint, jsonify
from scoreboard import get_store

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the live scoreboard!'})


@main.route('/health')
def health():
    return jsonify({'status': 'ok', 'active_matches': len(get_store())})
