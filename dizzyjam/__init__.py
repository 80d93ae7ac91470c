"""Python client for the Dizzyjam e-commerce API."""

from dizzyjam.client import API_URL, DizzyjamClient
from dizzyjam.errors import (
    DizzyjamError,
    InvalidFileError,
    RemoteApiError,
    TransportError,
    UnauthenticatedError,
    UnparsableResponseError,
    UnsupportedGroupError,
)
from dizzyjam.files import FileRef
from dizzyjam.models import Cart, CartItem, Order, OrderDetails
from dizzyjam.signing import Credentials

__all__ = [
    "API_URL",
    "Cart",
    "CartItem",
    "Credentials",
    "DizzyjamClient",
    "DizzyjamError",
    "FileRef",
    "InvalidFileError",
    "Order",
    "OrderDetails",
    "RemoteApiError",
    "TransportError",
    "UnauthenticatedError",
    "UnparsableResponseError",
    "UnsupportedGroupError",
]
