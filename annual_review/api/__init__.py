"""API blueprints for the annual review"""

from annual_review.api.review import review_bp

__all__ = ['review_bp']
