import logging

from flask import Flask
from flask_cors import CORS

from team_balance import BalancingError

from .config import Config, balance_config
from .logging_config import setup_logging
from .services.rank_client import RankClient
from .utils import err

logger = logging.getLogger(__name__)

USER_ERROR_STATUS = {
    "not_enough_players": 400,
    "too_many_players": 400,
    "rank_lookup_failed": 502,
}


def create_app(rank_lookup=None, settings=Config) -> Flask:
    setup_logging(settings.LOG_LEVEL)
    # fail at startup on a misconfigured balancing policy
    balance_config(settings)

    app = Flask(__name__)
    app.url_map.strict_slashes = False
    app.config["SETTINGS"] = settings
    app.extensions["rank_lookup"] = rank_lookup or RankClient.from_config(settings)
    CORS(
        app,
        resources={r"/*": {"origins": "*"}},
        allow_headers=["Content-Type", "Authorization"],
    )

    from .routes import teams

    api_prefix = "/api"
    app.register_blueprint(teams.bp, url_prefix=f"{api_prefix}/teams")

    @app.get("/api/health")
    def healthcheck():
        return {"ok": True}

    @app.errorhandler(BalancingError)
    def handle_balancing_error(exc: BalancingError):
        if exc.internal:
            logger.error("Balancing invariant violated: %s", exc.message)
            return err(exc.code, 500)
        status = USER_ERROR_STATUS.get(exc.code, 400)
        if status >= 500:
            logger.warning("Balancing request failed: %s", exc.message)
        return err(exc.code, status)

    return app
