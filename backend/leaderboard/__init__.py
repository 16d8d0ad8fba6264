from flask import Flask
from flask_cors import CORS
from config import Config
from leaderboard.services.scores import RankingService, ScoreStore


def create_app(config_class=Config, store=None):
    # Built client assets are served by the main blueprint, not Flask's /static
    flask_app = Flask(__name__, static_folder=None)
    flask_app.config.from_object(config_class)

    CORS(
        flask_app,
        resources={r'/api/*': {'origins': flask_app.config.get('CORS_ORIGINS', '*')}},
        methods=['GET', 'POST'],
        supports_credentials=True,
    )

    # One store and ranking service per app; tests inject their own store
    score_store = store if store is not None else ScoreStore()
    flask_app.extensions['score_store'] = score_store
    flask_app.extensions['ranking_service'] = RankingService(score_store, logger=flask_app.logger)

    from leaderboard.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api/scores')

    # Registered last so its catch-all route never shadows the API
    from leaderboard.main import main
    flask_app.register_blueprint(main)

    flask_app.logger.info(
        f"[startup] env={flask_app.config.get('APP_ENV')} serve_client={bool(flask_app.config.get('SERVE_CLIENT'))}"
    )

    return flask_app
