"""Error kinds raised while building an annual review"""


class AnnualReviewError(Exception):
    """Base class for annual review failures"""


class AuthenticationError(AnnualReviewError):
    """The GitHub token is missing or was rejected"""


class TransportError(AnnualReviewError):
    """GitHub answered with a non-success response or could not be reached"""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class GraphQueryError(AnnualReviewError):
    """A well-formed GraphQL response that carries query errors"""

    def __init__(self, errors: list):
        self.errors = errors or []
        message = "GraphQL error"
        if self.errors and isinstance(self.errors[0], dict):
            message = self.errors[0].get("message") or message
        super().__init__(message)


class DataShapeError(AnnualReviewError):
    """A required section of the GitHub response is missing"""
