"""WSGI entry point for the club bracket API."""

from flask import jsonify

from clubbracket import create_app

app = create_app()


@app.route("/health")
def health_check():
    """Report that the API is up and which tournament store it serves."""
    return jsonify({"status": "ok", "store": app.config["TOURNAMENT_STORE"]}), 200


if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=27272)  # nosec
