from .builder import build_request
from .client import BreachVIPClient
from .exceptions import BreachVIPError, ParseError, ValidationError
from .extractor import extract, extract_file
from .fields import FIELD_CATALOG, is_valid_field, normalize_list
from .models import ExtractedResults, RunSummary, SearchRequest
from .runner import SearchRunner
from .version import __version__

__all__ = [
    "BreachVIPClient",
    "BreachVIPError",
    "ExtractedResults",
    "FIELD_CATALOG",
    "ParseError",
    "RunSummary",
    "SearchRequest",
    "SearchRunner",
    "ValidationError",
    "__version__",
    "build_request",
    "extract",
    "extract_file",
    "is_valid_field",
    "normalize_list",
]
