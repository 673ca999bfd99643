"""Flask server for the Ruleset Engine."""

import gzip
import logging
from flask import Flask, request, jsonify
from ruleset_engine.api import RulesetService
from ruleset_engine.config import HOST, PORT, LOG_LEVEL, OTEL_SERVICE_NAME, OTEL_COLLECTOR_ENDPOINT, OTEL_ENABLE_TRACING
from ruleset_engine.telemetry import telemetry_init

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize OpenTelemetry tracing (before Flask app creation)
telemetry_init(OTEL_SERVICE_NAME, OTEL_COLLECTOR_ENDPOINT or None, OTEL_ENABLE_TRACING)

app = Flask(__name__)

# Auto-instrument Flask routes (creates root span per request, extracts traceparent)
from opentelemetry.instrumentation.flask import FlaskInstrumentor
FlaskInstrumentor().instrument_app(app)

# Build the catalog once at module load (before any requests)
logger.info("Initializing RulesetService...")
service = RulesetService()
logger.info(f"Loaded {len(service.engine.catalog)} mods")


@app.before_request
def decompress_gzip():
    """Decompress gzip-encoded request bodies."""
    if request.content_encoding == "gzip":
        request._cached_data = gzip.decompress(request.get_data())


@app.after_request
def compress_gzip(response):
    """Gzip-compress response if the request was gzip-encoded."""
    if request.content_encoding == "gzip" and response.status_code == 200:
        response.data = gzip.compress(response.data)
        response.headers["Content-Encoding"] = "gzip"
        response.headers["Content-Length"] = len(response.data)
    return response


def _json_body():
    input_json = request.get_json(silent=True)
    if not input_json or not isinstance(input_json, dict):
        raise ValueError("Request body must be a JSON object")
    return input_json


@app.route('/health', methods=['GET'])
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"}), 200


@app.route('/api/mods', methods=['GET'])
def list_mods():
    """Mod catalog, optionally filtered with ?mode=osu|taiko|catch|mania."""
    try:
        return jsonify(service.mods(request.args.get('mode'))), 200
    except ValueError as e:
        logger.warning(f"Validation error: {e}")
        return jsonify({"error": str(e)}), 400


@app.route('/api/rulesets/validate', methods=['POST'])
def validate_ruleset():
    """Validate a ruleset and dry-run it against optional test scores.

    Returns 400 with the itemized errors when the ruleset is rejected.
    """
    try:
        result = service.validate(_json_body())
        if not result["success"]:
            logger.info(f"Ruleset rejected with {len(result['errors'])} error(s)")
            return jsonify(result), 400
        return jsonify(result), 200

    except ValueError as e:
        logger.warning(f"Validation error: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Ruleset validation failed")
        return jsonify({"error": f"Validation failed: {str(e)}"}), 500


@app.route('/api/rulesets/match', methods=['POST'])
def match_score():
    """Check one score's mods against a ruleset."""
    try:
        return jsonify(service.match(_json_body())), 200

    except ValueError as e:
        logger.warning(f"Validation error: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Matching failed")
        return jsonify({"error": f"Matching failed: {str(e)}"}), 500


@app.route('/api/rulesets/preview', methods=['POST'])
def preview_ruleset():
    """Generated name and description for a ruleset being edited."""
    try:
        return jsonify(service.preview(_json_body())), 200

    except ValueError as e:
        logger.warning(f"Validation error: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Preview failed")
        return jsonify({"error": f"Preview failed: {str(e)}"}), 500


@app.route('/api/rulesets/winner', methods=['POST'])
def select_winner():
    """Pick the highest qualifying score for a ruleset."""
    try:
        return jsonify(service.winner(_json_body())), 200

    except ValueError as e:
        logger.warning(f"Validation error: {e}")
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Winner selection failed")
        return jsonify({"error": f"Winner selection failed: {str(e)}"}), 500


if __name__ == '__main__':
    app.run(host=HOST, port=PORT, debug=True)
