from flask import Blueprint, current_app, jsonify, request
from leaderboard.services.scores import RankingService, ValidationError


scores = Blueprint('scores', __name__)


def _ranking() -> RankingService:
    return current_app.extensions['ranking_service']


@scores.errorhandler(ValidationError)
def handle_validation_error(exc):
    current_app.logger.info(f"[score-rejected] reason={exc.message!r}")
    return jsonify({'error': exc.message}), 400


@scores.route('', methods=['GET'])
def list_scores():
    ranked = _ranking().list()
    return jsonify([entry.to_dict() for entry in ranked])


@scores.route('', methods=['POST'])
def add_score():
    # A missing or malformed body is just another invalid payload
    data = request.get_json(silent=True)
    entry = _ranking().submit(data)
    current_app.logger.info(f"[score-added] name={entry.name!r} score={entry.score}")
    return jsonify({
        'message': 'Score added successfully',
        'score': entry.to_dict()
    }), 201
