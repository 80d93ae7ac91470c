"""Order API methods: pricing and checkout."""

from dizzyjam.groups.base import MethodGroup
from dizzyjam.models import Cart, Order


class OrderGroup(MethodGroup):
    """Price carts and place orders."""

    def calculate(self, cart: Cart | Order, country: str | None = None) -> dict:
        """Calculate prices, shipping fees and totals for a cart.

        Args:
            cart: Cart (or order) holding the items.
            country: 2-char country code for shipping costs; None lets the
                API use its default.
        """
        params = cart.item_params()
        params["country"] = country
        return self.api.request("order/calculate", params)

    def test_checkout(self, order: Order) -> dict:
        """Test checkout; the order will not be placed."""
        params = order.checkout_params()
        params["checkout"] = 0
        return self.api.request("order/checkout", params, signed=True)

    def checkout(self, order: Order, return_url: str, mobile: bool = False) -> dict:
        """Real checkout; the order WILL be placed.

        Args:
            order: Order details and items.
            return_url: URL to return to after the order is placed.
            mobile: Request payment on Paypal's mobile site.
        """
        params = order.checkout_params()
        params["mobile"] = mobile
        params["return_url"] = return_url
        params["checkout"] = 1
        return self.api.request("order/checkout", params, signed=True)
