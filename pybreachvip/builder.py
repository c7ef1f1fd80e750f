import logging

from .exceptions import ValidationError
from .fields import is_valid_field, normalize_list
from .models import SearchRequest

logger = logging.getLogger(__name__)


def build_request(
    term,
    raw_fields,
    raw_categories=None,
    wildcard=None,
    case_sensitive=None,
):
    """Normalize raw CLI values into a validated :class:`SearchRequest`.

    ``raw_fields`` and ``raw_categories`` are comma-separated strings. Each
    field must be in the catalog; the first one that is not raises
    :class:`ValidationError` and no request is built. ``term`` is expected to
    be non-empty already. ``wildcard`` and ``case_sensitive`` stay ``None``
    unless the caller set them, which keeps them off the wire.
    """
    fields = normalize_list(raw_fields)
    for name in fields:
        if not is_valid_field(name):
            raise ValidationError(
                f"invalid field: {name}",
                kind=ValidationError.INVALID_FIELD,
                field=name,
            )
    if not fields:
        raise ValidationError(
            "at least one field is required",
            kind=ValidationError.NO_FIELDS,
        )

    request = SearchRequest(
        term=term,
        fields=tuple(fields),
        categories=tuple(normalize_list(raw_categories)),
        wildcard=wildcard,
        case_sensitive=case_sensitive,
    )
    logger.debug("Built search request: %s", request.to_payload())
    return request
