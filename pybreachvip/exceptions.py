class BreachVIPError(Exception):
    """Raised when a search cannot be completed."""

    def __init__(self, message, *, status_code=None, retry_after=None):
        super().__init__(message)
        self.status_code = status_code
        self.retry_after = retry_after


class ValidationError(BreachVIPError):
    """Raised when CLI input cannot be turned into a search request."""

    INVALID_FIELD = "invalid_field"
    NO_FIELDS = "no_fields"

    def __init__(self, message, *, kind, field=None):
        super().__init__(message)
        self.kind = kind
        self.field = field


class ParseError(BreachVIPError):
    """Raised when the API response is not a ``{"results": [...]}`` document."""

    MALFORMED_JSON = "malformed_json"
    MISSING_RESULTS_ARRAY = "missing_results_array"

    def __init__(self, message, *, kind):
        super().__init__(message)
        self.kind = kind
