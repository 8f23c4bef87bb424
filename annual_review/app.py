"""Flask web backend serving annual reviews"""

import logging

from flask import Flask

from annual_review.api import review_bp


def create_app() -> Flask:
    app = Flask(__name__)
    app.register_blueprint(review_bp)
    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, port=5000)
