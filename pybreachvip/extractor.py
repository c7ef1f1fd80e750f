"""Extraction of email and password values from a breach.vip response.

The API's schema for per-record fields is not uniform: the same key may hold a
string in one record and a list of strings in the next. Each key is decoded
once into one of the variants below and the variant decides which strings it
contributes.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, List

from .exceptions import ParseError
from .models import ExtractedResults

logger = logging.getLogger(__name__)

EMAIL_KEY = "email"
PASSWORD_KEY = "password"


@dataclass(frozen=True)
class Absent:
    def texts(self):
        return []


@dataclass(frozen=True)
class Text:
    value: str

    def texts(self):
        return [self.value]


@dataclass(frozen=True)
class TextList:
    values: List[Any] = field(default_factory=list)

    def texts(self):
        return [value for value in self.values if isinstance(value, str)]


@dataclass(frozen=True)
class Other:
    value: Any = None

    def texts(self):
        return []


def decode_field_value(record, key):
    if key not in record:
        return Absent()
    value = record[key]
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, list):
        return TextList(value)
    return Other(value)


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def _load_results(json_bytes):
    try:
        document = json.loads(json_bytes, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as error:
        raise ParseError(
            f"response is not valid JSON: {error}",
            kind=ParseError.MALFORMED_JSON,
        ) from error

    results = document.get("results") if isinstance(document, dict) else None
    if not isinstance(results, list):
        raise ParseError(
            "results field not found or not array",
            kind=ParseError.MISSING_RESULTS_ARRAY,
        )
    return results


def extract(json_bytes):
    """Parse a response body and collect its email and password values.

    ``total`` counts every element of ``results``, including ones that are
    not objects. Values are kept in document order with duplicates.
    """
    results = _load_results(json_bytes)
    extracted = ExtractedResults(total=len(results))
    skipped = 0
    for record in results:
        if not isinstance(record, dict):
            skipped += 1
            continue
        extracted.emails.extend(decode_field_value(record, EMAIL_KEY).texts())
        extracted.passwords.extend(decode_field_value(record, PASSWORD_KEY).texts())

    if skipped:
        logger.debug("Skipped %d non-object result records", skipped)
    logger.debug(
        "Extracted %d emails and %d passwords from %d results",
        len(extracted.emails),
        len(extracted.passwords),
        extracted.total,
    )
    return extracted


def extract_file(path):
    with open(path, "rb") as handle:
        return extract(handle.read())
