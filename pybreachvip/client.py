import logging

import requests

from . import config
from .exceptions import BreachVIPError
from .version import USER_AGENT

logger = logging.getLogger(__name__)


class BreachVIPClient:
    ERROR_STRINGS = {
        400: "400 - Bad request - The search request was rejected",
        401: "401 - Unauthorized - The API refused the request",
        403: "403 - Forbidden - Request is forbidden",
        404: "404 - Not found - Search endpoint not found",
        429: (
            "429 - Rate limit exceeded - The rate limit for the API has been reached. "
            "Please try again later"
        ),
        "5XX": "5XX - Server error - The server returned an error",
    }

    def __init__(self, url=None, timeout=None, user_agent=None, session=None):
        self.url = url or config.API_URL
        self._timeout = config.DEFAULT_TIMEOUT if timeout is None else timeout
        self._session = session if session is not None else requests.Session()
        self._headers = {
            "User-Agent": user_agent or USER_AGENT,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _raise_for_error(self, response):
        if response.status_code == 200:
            return
        retry_after = response.headers.get("Retry-After")
        if response.status_code >= 500:
            message = self.ERROR_STRINGS["5XX"]
        else:
            message = self.ERROR_STRINGS.get(
                response.status_code,
                f"Unexpected response (HTTP {response.status_code})",
            )
        raise BreachVIPError(
            message,
            status_code=response.status_code,
            retry_after=retry_after,
        )

    def search(self, request):
        """POST ``request`` to the search endpoint and return the raw body."""
        payload = request.to_payload()
        logger.debug("POST %s %s", self.url, payload)
        try:
            response = self._session.post(
                self.url,
                json=payload,
                headers=self._headers,
                timeout=self._timeout,
            )
        except requests.RequestException as error:
            raise BreachVIPError("Unable to reach breach.vip API") from error
        logger.debug("Received HTTP %s from %s", response.status_code, self.url)
        self._raise_for_error(response)
        return response.content
