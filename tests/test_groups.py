"""Tests for the catalogue, order and manage method groups."""

from urllib.parse import parse_qs, urlsplit

import pytest

from dizzyjam.errors import InvalidFileError
from dizzyjam.files import FileRef
from dizzyjam.models import Cart, Order


def _call(transport, index=-1):
    url, files = transport.calls[index]
    parts = urlsplit(url)
    query = {k: v[0] for k, v in parse_qs(parts.query, keep_blank_values=True).items()}
    return parts.path, query, files


@pytest.fixture
def logo(tmp_path):
    path = tmp_path / "logo.png"
    path.write_bytes(b"png")
    return str(path)


class TestCatalogue:
    def test_stores(self, client, transport):
        client.catalogue.stores(count=10)
        path, query, _ = _call(transport)
        assert path == "/v1/catalogue/stores.json"
        assert query == {"count": "10"}

    def test_store_info(self, client, transport):
        client.catalogue.store_info("abc", country="us", embed_settings="yes")
        path, query, _ = _call(transport)
        assert path == "/v1/catalogue/store_info.json"
        assert query == {"store_id": "abc", "country": "us", "embed_settings": "yes"}

    def test_product_info(self, client, transport):
        client.catalogue.product_info(42)
        assert _call(transport)[1] == {"product_id": "42"}


class TestOrder:
    def _order(self):
        order = Order.create(
            "Jo Bloggs", "jo@example.com", "us", "10001", "NY", "New York", "1 Main St"
        )
        return order.add_item(42, "red", "M", 2)

    def test_calculate_is_unsigned(self, client, transport):
        client.order.calculate(Cart().add_item(42, "red", "M", 2), "de")
        path, query, _ = _call(transport)
        assert path == "/v1/order/calculate.json"
        assert query == {
            "item1_product_id": "42",
            "item1_colour_id": "red",
            "item1_size": "M",
            "item1_quantity": "2",
            "country": "de",
        }

    def test_calculate_without_country(self, client, transport):
        client.order.calculate(Cart().add_item(42, "red", "M", 2))
        assert "country" not in _call(transport)[1]

    def test_order_calculate_uses_order_country(self, client, transport):
        self._order().calculate(client)
        assert _call(transport)[1]["country"] == "us"

    def test_test_checkout(self, signed_client, transport):
        self._order().test_checkout(signed_client)
        path, query, _ = _call(transport)
        assert path == "/v1/order/checkout.json"
        assert query["checkout"] == "0"
        assert query["item1_product_id"] == "42"
        assert query["address_1"] == "1 Main St"
        assert "address_2" not in query
        assert {"auth_id", "auth_ts", "auth_sig"} <= set(query)

    def test_checkout(self, signed_client, transport):
        self._order().checkout(signed_client, "http://shop.example/done")
        query = _call(transport)[1]
        assert query["checkout"] == "1"
        assert query["mobile"] == "0"
        assert query["return_url"] == "http://shop.example/done"


class TestManage:
    def test_my_stores(self, signed_client, transport):
        signed_client.manage.my_stores(user_id=0)
        path, query, _ = _call(transport)
        assert path == "/v1/manage/my_stores.json"
        assert query["user_id"] == "0"
        assert "count" not in query

    def test_create_store_with_logo(self, signed_client, transport, logo):
        signed_client.manage.create_store(
            "abc", "My Store", "Shirts", logo=logo, genres=[3, 7], website="http://x.test"
        )
        _, query, files = _call(transport)
        assert files == {"logo_file": FileRef(logo)}
        assert query["genres"] == "3,7"
        assert "logo_file" not in query

    def test_create_store_without_optionals(self, signed_client, transport):
        signed_client.manage.create_store("abc", "My Store", "Shirts", twitter_id="me")
        _, query, files = _call(transport)
        assert files is None
        assert "genres" not in query

    def test_create_store_bad_logo(self, signed_client, transport, tmp_path):
        with pytest.raises(InvalidFileError):
            signed_client.manage.create_store(
                "abc", "My Store", "Shirts", logo=str(tmp_path / "missing.png")
            )
        assert transport.calls == []

    def test_edit_store_keeps_unset_fields(self, signed_client, transport):
        signed_client.manage.edit_store("abc", name="New name")
        _, query, files = _call(transport)
        assert query["name"] == "New name"
        assert query["clear"] == ""
        assert "website" not in query
        assert "description" not in query
        assert files is None

    def test_edit_store_clear_list(self, signed_client, transport):
        signed_client.manage.edit_store(
            "abc", logo="", genres=[], website="", myspace_url="http://myspace.test/me"
        )
        _, query, _ = _call(transport)
        assert query["clear"] == "logo,genres,website"
        assert query["myspace_url"] == "http://myspace.test/me"
        assert "website" not in query
        assert "genres" not in query

    def test_edit_store_genres(self, signed_client, transport):
        signed_client.manage.edit_store("abc", genres=[1, 2])
        assert _call(transport)[1]["genres"] == "1,2"

    def test_edit_store_uploads_logo(self, signed_client, transport, logo):
        signed_client.manage.edit_store("abc", logo=logo)
        _, query, files = _call(transport)
        assert files == {"logo_file": FileRef(logo)}
        assert query["clear"] == ""

    def test_delete_store(self, signed_client, transport):
        signed_client.manage.delete_store("abc")
        path, query, _ = _call(transport)
        assert path == "/v1/manage/delete_store.json"
        assert query["store_id"] == "abc"

    def test_upload_design(self, signed_client, transport, logo):
        signed_client.manage.upload_design("abc", logo)
        _, _, files = _call(transport)
        assert files == {"design_file": FileRef(logo)}

    def test_create_product_defaults(self, signed_client, transport):
        signed_client.manage.create_product("abc", "Tee", 99)
        _, query, files = _call(transport)
        assert query["design_id"] == "99"
        assert query["product_type_id"] == "all"
        assert query["process"] == "all"
        assert query["colours"] == "all"
        assert files is None

    def test_create_product_with_design_file(self, signed_client, transport, logo):
        signed_client.manage.create_product(
            "abc", "Tee", logo, product_type_id=4, process="dtg", colours=[1, 5], featured_colour=5
        )
        _, query, files = _call(transport)
        assert files == {"design_file": FileRef(logo)}
        assert query["colours"] == "1,5"
        assert query["product_type_id"] == "4"
        assert "design_id" not in query

    def test_store_options(self, signed_client, transport):
        signed_client.manage.store_options()
        path, query, _ = _call(transport)
        assert path == "/v1/manage/store_options.json"
        assert set(query) == {"auth_id", "auth_ts", "auth_sig"}

    def test_product_options(self, signed_client, transport):
        signed_client.manage.product_options("abc")
        path, query, _ = _call(transport)
        assert path == "/v1/manage/product_options.json"
        assert query["store_id"] == "abc"

    def test_my_users(self, signed_client, transport):
        signed_client.manage.my_users(count=5)
        path, query, _ = _call(transport)
        assert path == "/v1/manage/my_users.json"
        assert query["count"] == "5"
        assert "start" not in query

    def test_create_user_without_password(self, signed_client, transport):
        signed_client.manage.create_user("sub@example.com", name="Sub User")
        path, query, _ = _call(transport)
        assert path == "/v1/manage/create_user.json"
        assert query["email"] == "sub@example.com"
        assert query["name"] == "Sub User"
        assert "password" not in query

    def test_edit_product_keeps_colours_when_empty(self, signed_client, transport):
        signed_client.manage.edit_product(12, name="Renamed")
        path, query, _ = _call(transport)
        assert path == "/v1/manage/edit_product.json"
        assert query["colours"] == ""
        assert query["name"] == "Renamed"
        assert "featured_colour" not in query

    def test_edit_product_colours(self, signed_client, transport):
        signed_client.manage.edit_product(12, colours=[3, 4], featured_colour=4)
        query = _call(transport)[1]
        assert query["colours"] == "3,4"
        assert query["featured_colour"] == "4"
        assert "name" not in query

    def test_delete_product(self, signed_client, transport):
        signed_client.manage.delete_product(12)
        path, query, _ = _call(transport)
        assert path == "/v1/manage/delete_product.json"
        assert query["product_id"] == "12"

    def test_delete_design(self, signed_client, transport):
        signed_client.manage.delete_design(7)
        path, query, _ = _call(transport)
        assert path == "/v1/manage/delete_design.json"
        assert query["design_id"] == "7"
