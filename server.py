"""Video check - Flask web application returning parental-review ratings for a video."""

import os
import json
import logging
from typing import Optional

from flask import Flask, Response, request, jsonify
from flask_cors import CORS

from videocheck.config import Config
from videocheck.models import CheckVideoRequest
from videocheck.processors.video_checker import VideoChecker

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _error(message: str, status_code: int = 400):
    return jsonify({"error": message}), status_code


def create_app(config: Optional[Config] = None, checker: Optional[VideoChecker] = None) -> Flask:
    """Build the Flask app around a single config and pipeline instance."""
    config = config or Config()
    config.validate()
    checker = checker or VideoChecker(config)

    app = Flask(__name__)
    CORS(app, origins="*", send_wildcard=True, allow_headers=CORS_ALLOW_HEADERS)

    @app.route("/", methods=["POST", "OPTIONS"])
    def check_video():
        """Fetch, clip and classify the transcript of the posted video URL."""
        # Preflight for browser callers
        if request.method == "OPTIONS":
            return "ok", 200

        try:
            body = json.loads(request.get_data(as_text=True))
            check_request = CheckVideoRequest.model_validate(body)
            content = checker.check(check_request.url)
        except Exception as e:
            logger.error(f"Video check failed: {e}")
            return _error(str(e), 400)

        return Response(content, status=200, mimetype="application/json")

    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "healthy"})

    return app


if __name__ == "__main__":
    config = Config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    port = int(os.environ.get("PORT", 8080))
    create_app(config).run(host="0.0.0.0", port=port, debug=False)
