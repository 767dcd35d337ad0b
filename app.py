import logging

from flask import Flask, Response, request, jsonify

import neoWs
from config import ProxyConfig, load_config

USAGE = (
    "NASA NEO API: use /api/asteroids?start=YYYY-MM-DD&end=YYYY-MM-DD"
    " - example: /api/asteroids?start=2024-01-01&end=2024-01-07"
)


def create_app(config: ProxyConfig) -> Flask:
    """Build the proxy app. Routes read settings from `config`, never from the environment."""
    app = Flask(__name__)
    app.logger.setLevel(logging.INFO)
    # keep NeoWs date order in the response
    app.json.sort_keys = False

    # --------------- Root: usage string --------------
    @app.route("/")
    def usage():
        app.logger.info("Received request for / from %s", request.remote_addr)
        return USAGE

    # --------------- Feed proxy --------------
    @app.route("/api/asteroids")
    def asteroids():
        start = request.args.get("start") or config.default_start
        end = request.args.get("end") or config.default_end

        try:
            outcome = neoWs.fetch_asteroid_feed(start, end, config)

            if isinstance(outcome, neoWs.UpstreamRejection):
                return Response(outcome.body, status=outcome.status_code)

            if isinstance(outcome, neoWs.FeedFailure):
                app.logger.error("Error (%s): %s", outcome.kind, outcome.message, exc_info=outcome.exc)
                return jsonify({"error": outcome.message}), 500

            # two sinks fed from the same result: the log and the response body
            neoWs.log_feed(outcome, app.logger)
            return jsonify(outcome)
        except Exception as e:
            app.logger.exception("Error: %s", e)
            return jsonify({"error": str(e)}), 500

    return app


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = load_config()
    app = create_app(config)
    app.logger.info("Server running at http://localhost:%s", config.port)
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
