"""Dizzyjam API client: request building, signing and method group routing."""

import json
import logging
import os
from typing import Any

from dotenv import load_dotenv

from dizzyjam.errors import (
    RemoteApiError,
    TransportError,
    UnparsableResponseError,
    UnsupportedGroupError,
)
from dizzyjam.files import FileRef
from dizzyjam.groups import GROUPS, CatalogueGroup, ManageGroup, MethodGroup, OrderGroup
from dizzyjam.signing import Credentials, build_query, sign
from dizzyjam.transport import RequestsTransport, Transport

load_dotenv()

logger = logging.getLogger(__name__)

API_URL = "http://www.dizzyjam.com/api/v1/"


def _is_success(flag: Any) -> bool:
    """Interpret the loosely typed ``success`` field; the string "0" is false."""
    return bool(flag) and flag != "0"


class DizzyjamClient:
    """Client for the Dizzyjam JSON API."""

    def __init__(
        self,
        api_url: str | None = None,
        auth_id: str | None = None,
        api_key: str | None = None,
        transport: Transport | None = None,
    ):
        api_url = api_url or os.getenv("DIZZYJAM_API_URL") or API_URL
        self.api_url = api_url.rstrip("/") + "/"
        self.transport = transport or RequestsTransport()
        self._credentials: Credentials | None = None
        self._groups: dict[str, MethodGroup] = {}

        auth_id = auth_id or os.getenv("DIZZYJAM_AUTH_ID")
        api_key = api_key or os.getenv("DIZZYJAM_API_KEY")
        if auth_id and api_key:
            self.set_credentials(auth_id, api_key)

    @property
    def authenticated(self) -> bool:
        return self._credentials is not None

    def set_credentials(self, auth_id: str, api_key: str) -> "DizzyjamClient":
        """Set the API credentials used for signed requests.

        Returns:
            The client itself, for chaining.
        """
        self._credentials = Credentials(auth_id, api_key)
        return self

    def request(self, method: str, params: dict | None = None, signed: bool = False) -> dict:
        """Perform an API call.

        Args:
            method: API method path (e.g. catalogue/stores).
            params: Method parameters. None values are omitted and FileRef
                values are uploaded as multipart fields.
            signed: Add authentication fields to the request.

        Returns:
            The parsed JSON response.

        Raises:
            UnauthenticatedError: If signed and no credentials are configured.
            TransportError: If the request failed without a response.
            UnparsableResponseError: If the body (even an empty one) is not
                a JSON object.
            RemoteApiError: If the API reports a failure.
        """
        uploads: dict[str, FileRef] = {}
        query: dict = {}
        for name, value in (params or {}).items():
            if isinstance(value, FileRef):
                uploads[name] = value
            else:
                query[name] = value

        if signed:
            query = sign(self._credentials, method, query)

        url = f"{self.api_url}{method}.json?{build_query(query)}"
        logger.debug(
            "Calling %s (signed=%s, uploads=%s)", method, signed, sorted(uploads) or None
        )
        result = self.transport.send(url, uploads or None)
        return self._parse(result.body, result.url, result.http_status)

    @staticmethod
    def _parse(body: str | None, url: str, http_status: int) -> dict:
        """Turn a raw response into the parsed body or the matching error."""
        if body is None:
            details = {"url": url, "http_status": http_status}
            raise TransportError("HTTP request failed", http_status, details)

        try:
            response: Any = json.loads(body)
        except ValueError:
            response = None
        if not isinstance(response, dict):
            raise UnparsableResponseError("Unparsable API response", 500, {"response": body})

        if _is_success(response.get("success")):
            return response
        raise RemoteApiError(
            response.get("error", ""),
            response.get("errorCode", 0),
            response.get("errorDetails"),
        )

    def group(self, name: str) -> MethodGroup:
        """Return the method group handler for ``name``, creating it once.

        Raises:
            UnsupportedGroupError: If no such group exists.
        """
        handler = self._groups.get(name)
        if handler is not None:
            return handler
        group_class = GROUPS.get(name)
        if group_class is None:
            raise UnsupportedGroupError(
                "Unsupported API method group", 400, {"group": name}
            )
        handler = self._groups[name] = group_class(self)
        return handler

    @property
    def catalogue(self) -> CatalogueGroup:
        return self.group("catalogue")

    @property
    def order(self) -> OrderGroup:
        return self.group("order")

    @property
    def manage(self) -> ManageGroup:
        return self.group("manage")
