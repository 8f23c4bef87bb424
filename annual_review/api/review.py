"""Annual review API endpoints"""

import logging
from datetime import date, datetime, timezone

from flask import Blueprint, jsonify, request

from annual_review.config import get_github_token
from annual_review.errors import (
    AuthenticationError,
    DataShapeError,
    GraphQueryError,
    TransportError,
)
from annual_review.github.review_fetcher import ReviewFetcher
from annual_review.github.review_processor import ReviewAssembler

logger = logging.getLogger(__name__)

review_bp = Blueprint('review', __name__, url_prefix='/api')


def get_request_token() -> str:
    """Bearer token from the request, falling back to GITHUB_TOKEN"""
    header = request.headers.get("Authorization", "")
    if header.startswith("Bearer "):
        return header[len("Bearer "):].strip()
    return get_github_token()


@review_bp.route("/review")
def get_review():
    """Get the annual review of the token owner"""
    try:
        year = int(request.args.get("year", date.today().year))
    except ValueError:
        return jsonify({"error": "year must be an integer"}), 400

    token = get_request_token()
    if not token:
        return jsonify({"error": "GitHub token required"}), 401

    try:
        summary = ReviewAssembler(ReviewFetcher(token)).build(year)
        return jsonify(summary.to_dict())
    except AuthenticationError as e:
        return jsonify({"error": str(e)}), 401
    except (TransportError, GraphQueryError, DataShapeError) as e:
        logger.error("Failed to build review for %d: %s", year, e)
        return jsonify({"error": str(e)}), 502


@review_bp.route("/validate-token", methods=["POST"])
def validate_token():
    """Check whether a token can read the user profile"""
    token = get_request_token()
    if not token:
        return jsonify({"valid": False})
    return jsonify({"valid": ReviewFetcher(token).validate_token()})


@review_bp.route("/health")
def health_check():
    """Health check endpoint"""
    return jsonify({
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "token_configured": bool(get_github_token())
    })
