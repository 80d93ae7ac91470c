"""HTTP transports used by the Dizzyjam client to reach the API."""

import logging
from abc import ABC, abstractmethod
from contextlib import ExitStack
from dataclasses import dataclass

import requests

from dizzyjam.files import FileRef

logger = logging.getLogger(__name__)


@dataclass
class TransportResult:
    """Outcome of a single HTTP exchange.

    ``body`` is None when the request failed without a response; ``url``
    and ``http_status`` then describe what was attempted (status 0 when the
    server was never reached). An empty reply is an empty string.
    """

    body: str | None
    url: str
    http_status: int


class Transport(ABC):
    """Base class that all HTTP transports must implement."""

    @abstractmethod
    def send(
        self,
        url: str,
        files: dict[str, FileRef] | None = None,
    ) -> TransportResult:
        """Perform a request against a fully formed URL.

        Args:
            url: Target URL including the query string.
            files: Upload fields keyed by field name. A GET request is made
                when empty, a multipart POST otherwise.

        Returns:
            TransportResult describing the response.
        """


class RequestsTransport(Transport):
    """Transport backed by a ``requests.Session``."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.timeout = timeout

    def send(
        self,
        url: str,
        files: dict[str, FileRef] | None = None,
    ) -> TransportResult:
        try:
            if files:
                resp = self._post_files(url, files)
            else:
                resp = self.session.get(url, timeout=self.timeout)
        except (requests.RequestException, OSError) as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            return TransportResult(body=None, url=url, http_status=0)

        logger.debug("%s %s -> %s", resp.request.method, resp.url, resp.status_code)
        return TransportResult(
            body=resp.text,
            url=resp.url,
            http_status=resp.status_code,
        )

    def _post_files(self, url: str, files: dict[str, FileRef]) -> requests.Response:
        """POST the given files as multipart fields, opening them just in time."""
        with ExitStack() as stack:
            payload = {
                field: (ref.name, stack.enter_context(open(ref.path, "rb")))
                for field, ref in files.items()
            }
            return self.session.post(url, files=payload, timeout=self.timeout)
