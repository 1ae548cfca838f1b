from flask import Flask, request, jsonify
from .core.router import route_sentiment, route_checkin, PayloadError
from . import config

app = Flask(__name__)                     # Flask app

if config.ANALYTICS_ENABLED:
    print("Analytics endpoint configured, sentiment events will be captured")
else:
    print("Analytics not configured, events logged locally only")

def _body():
    return request.get_json(force=True, silent=True)   # None on bad JSON

@app.errorhandler(PayloadError)
def bad_payload(e):
    return jsonify({"success": False, "error": str(e)}), 400

@app.route("/v1/sentiment", methods=["POST"])
def sentiment():
    body = _body()
    return jsonify(route_sentiment(body if body is not None else {}))

@app.route("/v1/checkins/sentiment", methods=["POST"])
def checkin_sentiment():
    body = _body()
    return jsonify(route_checkin(body if body is not None else {}))

@app.route("/health", methods=["GET"])
def health():
    return jsonify({
        "status": "ok",
        "environment": config.APP_ENV,
        "analytics_enabled": config.ANALYTICS_ENABLED,
    })

if __name__ == "__main__":
    print(f"Sentiment service running at http://localhost:{config.PORT}/v1/sentiment")
    app.run(host=config.HOST, port=config.PORT, threaded=True, debug=True)  # dev server
