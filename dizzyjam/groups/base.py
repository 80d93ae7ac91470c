"""Base class for API method groups."""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dizzyjam.client import DizzyjamClient


class MethodGroup(ABC):
    """A named cluster of related API methods bound to one client."""

    def __init__(self, api: DizzyjamClient):
        self.api = api
