import logging
import os

from . import config
from .extractor import extract_file
from .models import RunSummary

logger = logging.getLogger(__name__)


def side_file_path(output_path, prefix):
    """Return ``output_path`` with ``prefix`` prepended to its file name."""
    directory, filename = os.path.split(output_path)
    return os.path.join(directory, prefix + filename)


def _write_bytes(path, data):
    with open(path, "wb") as handle:
        handle.write(data)


def _write_lines(path, values):
    # Lone surrogates from JSON escapes such as "\ud800" are written as "?".
    with open(path, "w", encoding="utf-8", errors="replace", newline="") as handle:
        handle.write("\n".join(values))


class SearchRunner:
    def __init__(self, client, max_results=config.MAX_RESULTS):
        self._client = client
        self._max_results = max_results

    def save_response(self, request, output_path):
        body = self._client.search(request)
        _write_bytes(output_path, body)
        logger.debug("Wrote %d bytes to %s", len(body), output_path)
        return output_path

    def process_response(self, output_path):
        """Extract results from a saved response and write the side files."""
        results = extract_file(output_path)
        summary = RunSummary(
            output_path=output_path,
            results=results,
            max_results=self._max_results,
        )
        if results.emails:
            summary.email_path = side_file_path(output_path, config.EMAIL_PREFIX)
            _write_lines(summary.email_path, results.emails)
        if results.passwords:
            summary.password_path = side_file_path(output_path, config.PASSWORD_PREFIX)
            _write_lines(summary.password_path, results.passwords)
        return summary

    def run(self, request, output_path):
        # A ParseError leaves the raw response in place for inspection.
        self.save_response(request, output_path)
        return self.process_response(output_path)
