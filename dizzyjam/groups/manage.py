"""Manage API methods for stores, designs and products (all signed)."""

from collections.abc import Sequence

from dizzyjam.files import FileRef
from dizzyjam.groups.base import MethodGroup

# Clear-list tokens that differ from the parameter name.
_CLEAR_TOKENS = {"logo_file": "logo"}


def _join(values: Sequence) -> str:
    return ",".join(str(v) for v in values)


class ManageGroup(MethodGroup):
    """Administer the stores and products of the API account."""

    def my_users(self, count: int | None = None, start: int | None = None) -> dict:
        """List sub-users of the API account.

        The API key needs permission to manage sub-users.
        """
        params = {"count": count, "start": start}
        return self.api.request("manage/my_users", params, signed=True)

    def create_user(
        self,
        email: str,
        name: str | None = None,
        password: str | None = None,
    ) -> dict:
        """Create a sub-user under the API account.

        Args:
            email: Email address of the sub-user, used for logging in.
            name: Full name of the sub-user.
            password: Password; the API generates one and returns it in the
                response when omitted.
        """
        params = {"email": email, "name": name, "password": password}
        return self.api.request("manage/create_user", params, signed=True)

    def my_stores(
        self,
        count: int | None = None,
        start: int | None = None,
        user_id: int | None = None,
    ) -> dict:
        """List stores that can be managed by the API account.

        Args:
            count: Number of stores to list (default: all).
            start: 0-based offset to start listing from.
            user_id: Only list stores owned by this sub-user; 0 lists only
                stores not belonging to sub-users.
        """
        params = {"count": count, "start": start, "user_id": user_id}
        return self.api.request("manage/my_stores", params, signed=True)

    def store_options(self) -> dict:
        """Return metadata needed to create a new store."""
        return self.api.request("manage/store_options", {}, signed=True)

    def create_store(
        self,
        store_id: str,
        name: str,
        description: str,
        logo: str | None = None,
        embed_shop: str | None = None,
        genres: Sequence[int] = (),
        website: str | None = None,
        myspace_url: str | None = None,
        facebook_url: str | None = None,
        twitter_id: str | None = None,
        rss_feed_url: str | None = None,
        user_id: int | None = None,
    ) -> dict:
        """Create a new store.

        At least one of website, myspace_url, facebook_url or twitter_id is
        required by the API.

        Args:
            store_id: Unique alphanumeric identifier for the store.
            name: Name of the store.
            description: Description of the store.
            logo: Path to an image file to upload as the store logo.
            embed_shop: "yes" or "no".
            genres: Numeric genre IDs (see store_options()).
            user_id: Sub-user who will own the store.

        Raises:
            InvalidFileError: If logo does not point to a readable file.
        """
        params = {
            "store_id": store_id,
            "name": name,
            "description": description,
            "logo_file": FileRef(logo) if logo else None,
            "embed_shop": embed_shop,
            "genres": _join(genres) if genres else None,
            "website": website,
            "myspace_url": myspace_url,
            "facebook_url": facebook_url,
            "twitter_id": twitter_id,
            "rss_feed_url": rss_feed_url,
            "user_id": user_id,
        }
        return self.api.request("manage/create_store", params, signed=True)

    def edit_store(
        self,
        store_id: str,
        name: str | None = None,
        description: str | None = None,
        logo: str | None = None,
        embed_shop: str | None = None,
        genres: Sequence[int] | str | None = None,
        website: str | None = None,
        myspace_url: str | None = None,
        facebook_url: str | None = None,
        twitter_id: str | None = None,
        rss_feed_url: str | None = None,
    ) -> dict:
        """Edit store details.

        None keeps the current value of a field. An empty string clears it
        (not allowed for name and description); genres is also cleared by
        an empty sequence. At least one of website, myspace_url,
        facebook_url or twitter_id must remain set on the store.
        """
        params: dict = {
            "store_id": store_id,
            "name": name,
            "description": description,
            "embed_shop": embed_shop,
        }
        if genres is not None and not isinstance(genres, str):
            genres = _join(genres)
        clearable = {
            "logo_file": FileRef(logo) if logo else logo,
            "genres": genres,
            "website": website,
            "myspace_url": myspace_url,
            "facebook_url": facebook_url,
            "twitter_id": twitter_id,
            "rss_feed_url": rss_feed_url,
        }

        clear = [_CLEAR_TOKENS.get(k, k) for k, v in clearable.items() if v == ""]
        params["clear"] = ",".join(clear)
        params.update({k: v for k, v in clearable.items() if v != ""})
        return self.api.request("manage/edit_store", params, signed=True)

    def delete_store(self, store_id: str) -> dict:
        return self.api.request("manage/delete_store", {"store_id": store_id}, signed=True)

    def product_options(self, store_id: str) -> dict:
        """Return metadata needed to create a product in a store."""
        return self.api.request("manage/product_options", {"store_id": store_id}, signed=True)

    def upload_design(self, store_id: str, design: str) -> dict:
        """Upload an image file as a new design.

        Raises:
            InvalidFileError: If design does not point to a readable file.
        """
        params = {"store_id": store_id, "design_file": FileRef(design)}
        return self.api.request("manage/upload_design", params, signed=True)

    def create_product(
        self,
        store_id: str,
        name: str,
        design: int | str,
        product_type_id: int | None = None,
        process: str | None = None,
        colours: Sequence[int] = (),
        featured_colour: int | None = None,
        scale: int | None = None,
        angle: int | None = None,
        horiz: int | None = None,
        vert: int | None = None,
    ) -> dict:
        """Create a new product.

        Args:
            store_id: Store the product is added to.
            name: Product name.
            design: Numeric ID of an existing design, or path to an image
                file to upload as a new design.
            product_type_id: Product type; None creates products of all types.
            process: Print process; None creates products for all processes.
            colours: Colour IDs to offer; empty offers all colours.
            featured_colour: Colour shown by default.
            scale: Design scale in percent of the print area (10-100).
            angle: Design angle (-180 to 180).
            horiz: Horizontal position (-100 flush left to 100 flush right).
            vert: Vertical position (-100 flush top to 100 flush bottom).
        """
        params: dict = {
            "store_id": store_id,
            "name": name,
            "product_type_id": "all" if product_type_id is None else product_type_id,
            "process": "all" if process is None else process,
            "colours": _join(colours) if colours else "all",
            "featured_colour": featured_colour,
            "scale": scale,
            "angle": angle,
            "horiz": horiz,
            "vert": vert,
        }
        if isinstance(design, int):
            params["design_id"] = design
        else:
            params["design_file"] = FileRef(design)
        return self.api.request("manage/create_product", params, signed=True)

    def edit_product(
        self,
        product_id: int,
        name: str | None = None,
        colours: Sequence[int] = (),
        featured_colour: int | None = None,
    ) -> dict:
        """Edit product details.

        An empty or None name, an empty colours list and a None featured
        colour all leave the current value unchanged.
        """
        params = {
            "product_id": product_id,
            "name": name,
            "colours": _join(colours),
            "featured_colour": featured_colour,
        }
        return self.api.request("manage/edit_product", params, signed=True)

    def delete_product(self, product_id: int) -> dict:
        return self.api.request("manage/delete_product", {"product_id": product_id}, signed=True)

    def delete_design(self, design_id: int) -> dict:
        return self.api.request("manage/delete_design", {"design_id": design_id}, signed=True)
