"""Catalogue API methods (public, unsigned)."""

from dizzyjam.groups.base import MethodGroup


class CatalogueGroup(MethodGroup):
    """Browse stores and products."""

    def stores(self, count: int | None = None, start: int | None = None) -> dict:
        """List all stores.

        Args:
            count: Number of stores to list (default: all).
            start: 0-based offset to start listing from.
        """
        params = {"count": count, "start": start}
        return self.api.request("catalogue/stores", params)

    def store_info(
        self,
        store_id: str,
        country: str | None = None,
        embed_settings: str | None = None,
        count: int | None = None,
        start: int | None = None,
    ) -> dict:
        """Get details for a store.

        Args:
            store_id: Alphanumeric ID of the store.
            country: 2-char country code for shipping costs.
            embed_settings: "yes" to include embed shop settings.
            count: Number of store products to list (default: all).
            start: 0-based offset to start listing products from.
        """
        params = {
            "store_id": store_id,
            "country": country,
            "embed_settings": embed_settings,
            "count": count,
            "start": start,
        }
        return self.api.request("catalogue/store_info", params)

    def product_info(self, product_id: int, country: str | None = None) -> dict:
        params = {"product_id": product_id, "country": country}
        return self.api.request("catalogue/product_info", params)
