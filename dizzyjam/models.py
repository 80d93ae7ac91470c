"""Shopping cart and order models that flatten into API parameters."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dizzyjam.client import DizzyjamClient

_ITEM_FIELDS = ("product_id", "colour_id", "size", "quantity")


@dataclass(frozen=True)
class CartItem:
    """A single line item in a cart."""

    product_id: int
    colour_id: str
    size: str
    quantity: int


class Cart:
    """Shopping cart holding the items for an order.

    Items have no identity beyond their position: clearing the cart and
    adding items again restarts the numbering at 1.
    """

    def __init__(self):
        self._items: list[CartItem] = []

    def add_item(self, product_id: int, colour_id: str, size: str, quantity: int) -> Cart:
        """Add an item to the cart.

        Args:
            product_id: Numeric ID of the product.
            colour_id: Colour ID.
            size: Size label.
            quantity: Quantity to order.

        Returns:
            The cart itself, for chaining.
        """
        self._items.append(CartItem(product_id, colour_id, size, quantity))
        return self

    def clear_items(self) -> Cart:
        self._items = []
        return self

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def item_params(self) -> dict:
        """Return API parameters for the cart items (item1_product_id, ...)."""
        params: dict = {}
        for index, item in enumerate(self._items, 1):
            for name in _ITEM_FIELDS:
                params[f"item{index}_{name}"] = getattr(item, name)
        return params

    def calculate(self, api: DizzyjamClient, country: str | None = None) -> dict:
        """Calculate prices, shipping fees and totals via the API.

        Args:
            api: Client used to perform the call.
            country: 2-char country code for shipping costs; None lets the
                API apply its default.
        """
        return api.order.calculate(self, country)


@dataclass
class OrderDetails:
    """Recipient and shipping address for an order."""

    name: str
    email: str
    country: str
    postcode: str
    region: str
    city: str
    address_1: str
    address_2: str | None = None


@dataclass
class Order:
    """A cart together with the recipient details needed to check out.

    Supports every cart operation by delegating to its own Cart.
    """

    details: OrderDetails
    cart: Cart = field(default_factory=Cart)

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        country: str,
        postcode: str,
        region: str,
        city: str,
        address1: str,
        address2: str | None = None,
    ) -> Order:
        """Build an order with an empty cart from the recipient fields."""
        details = OrderDetails(
            name=name,
            email=email,
            country=country,
            postcode=postcode,
            region=region,
            city=city,
            address_1=address1,
            address_2=address2,
        )
        return cls(details=details)

    def add_item(self, product_id: int, colour_id: str, size: str, quantity: int) -> Order:
        self.cart.add_item(product_id, colour_id, size, quantity)
        return self

    def clear_items(self) -> Order:
        self.cart.clear_items()
        return self

    @property
    def items(self) -> tuple[CartItem, ...]:
        return self.cart.items

    def __len__(self) -> int:
        return len(self.cart)

    def item_params(self) -> dict:
        return self.cart.item_params()

    def order_params(self) -> dict:
        """Return API parameters for the order details."""
        return asdict(self.details)

    def checkout_params(self) -> dict:
        """Return item and order detail parameters merged together."""
        return {**self.item_params(), **self.order_params()}

    def calculate(self, api: DizzyjamClient, country: str | None = None) -> dict:
        """Calculate the order via the API, defaulting to the order's country."""
        return self.cart.calculate(api, self.details.country if country is None else country)

    def test_checkout(self, api: DizzyjamClient) -> dict:
        """Run a test checkout; no order is placed."""
        return api.order.test_checkout(self)

    def checkout(self, api: DizzyjamClient, return_url: str, mobile: bool = False) -> dict:
        """Place the order for real.

        Args:
            api: Client used to perform the call.
            return_url: URL to return to after the order is placed.
            mobile: Request payment on Paypal's mobile site.
        """
        return api.order.checkout(self, return_url, mobile)
