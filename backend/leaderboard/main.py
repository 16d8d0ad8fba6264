from flask import Blueprint, abort, current_app, jsonify, send_from_directory
from werkzeug.utils import safe_join
import os

main = Blueprint('main', __name__)


@main.route('/', defaults={'path': ''})
@main.route('/<path:path>')
def serve_client(path):
    cfg = current_app.config
    if not cfg.get('SERVE_CLIENT'):
        if path:
            abort(404)
        return jsonify({'message': 'Welcome to the leaderboard server!'})

    # Unknown API paths stay 404s instead of falling through to the client
    if path == 'api' or path.startswith('api/'):
        abort(404)

    dist_dir = cfg.get('CLIENT_DIST_DIR')
    if path:
        candidate = safe_join(dist_dir, path)
        if candidate and os.path.isfile(candidate):
            return send_from_directory(dist_dir, path)
    # Single-page app: every other route renders the client shell
    return send_from_directory(dist_dir, 'index.html')
