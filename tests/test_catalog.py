"""Tests for catalog browsing and catalog administration"""
from decimal import Decimal

import pytest

from core.services.domains.catalog import DEFAULT_ABOUT, DEFAULT_CATEGORIES, PLACEHOLDER_IMAGE, sort_products
from tests.fakes import make_product


class TestSortProducts:
    def test_sort_by_name_case_insensitive(self):
        products = [make_product(id="1", name="rowing"), make_product(id="2", name="Bench")]
        assert [p.name for p in sort_products(products, "name")] == ["Bench", "rowing"]

    def test_sort_by_price(self):
        products = [
            make_product(id="1", price=Decimal("300")),
            make_product(id="2", price=Decimal("100")),
            make_product(id="3", price=Decimal("200")),
        ]
        assert [p.id for p in sort_products(products, "price-low")] == ["2", "3", "1"]
        assert [p.id for p in sort_products(products, "price-high")] == ["1", "3", "2"]

    def test_unknown_sort_key(self):
        with pytest.raises(ValueError):
            sort_products([], "rating")


class TestCatalogService:
    @pytest.mark.asyncio
    async def test_list_products_newest_first(self, db):
        products = await db.catalog.list_products()
        assert [p.id for p in products] == ["cable-crossover", "lat-pulldown", "treadmill-pro", "bench-press"]

    @pytest.mark.asyncio
    async def test_get_product(self, db):
        product = await db.catalog.get_product("treadmill-pro")
        assert product.price == Decimal("85000")

    @pytest.mark.asyncio
    async def test_get_missing_product_returns_none(self, db):
        assert await db.catalog.get_product("nope") is None
        assert await db.catalog.get_product("") is None

    @pytest.mark.asyncio
    async def test_products_by_category(self, db):
        products = await db.catalog.products_by_category("chest", "price-high")
        assert [p.id for p in products] == ["cable-crossover", "bench-press"]

    @pytest.mark.asyncio
    async def test_featured(self, db):
        featured = await db.catalog.featured_products()
        assert {p.id for p in featured} == {"bench-press", "lat-pulldown"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "query,expected",
        [
            ("TREADMILL", {"treadmill-pro"}),
            ("pulley", {"cable-crossover"}),
            ("chest", {"bench-press", "cable-crossover"}),
            ("kettlebell", set()),
        ],
    )
    async def test_search(self, db, query, expected):
        assert {p.id for p in await db.catalog.search(query)} == expected

    @pytest.mark.asyncio
    async def test_blank_search_returns_everything(self, db):
        assert len(await db.catalog.search("   ")) == 4

    @pytest.mark.asyncio
    async def test_deals_at_least_twenty_percent(self, db):
        deals = await db.catalog.deals()

        # bench 33%, crossover 20%; treadmill 5.6% is not a deal
        assert {d.product.id: d.discount_percent for d in deals} == {"bench-press": 33, "cable-crossover": 20}

    @pytest.mark.asyncio
    async def test_categories_with_counts(self, db):
        categories = await db.catalog.list_categories()

        assert [c.id for c in categories] == ["chest", "back", "cardio"]
        assert {c.id: c.product_count for c in categories} == {"chest": 2, "back": 1, "cardio": 1}
        assert categories[0].image == PLACEHOLDER_IMAGE
        assert categories[1].image == "https://cdn.example.com/back.jpg"

    @pytest.mark.asyncio
    async def test_categories_fall_back_to_defaults(self, db, fake_client):
        fake_client.failures.add("categories")

        categories = await db.catalog.list_categories()

        assert [c.id for c in categories] == [cid for cid, _, _ in DEFAULT_CATEGORIES]
        assert next(c for c in categories if c.id == "chest").product_count == 2

    @pytest.mark.asyncio
    async def test_get_category(self, db):
        assert (await db.catalog.get_category("back")).name == "Back"
        assert await db.catalog.get_category("legs") is None

    @pytest.mark.asyncio
    async def test_about(self, db):
        about = await db.catalog.get_about()
        assert about.title == "About Us"

    @pytest.mark.asyncio
    async def test_about_falls_back_to_default(self, db, fake_client):
        fake_client.failures.add("about_content")
        assert await db.catalog.get_about() == DEFAULT_ABOUT

    @pytest.mark.asyncio
    async def test_about_default_when_table_empty(self, db, fake_client):
        fake_client.tables["about_content"] = []
        assert (await db.catalog.get_about()).title == DEFAULT_ABOUT.title


class TestCatalogAdminService:
    @pytest.mark.asyncio
    async def test_create_product_generates_id(self, db, fake_client):
        product = await db.catalog_admin.create_product({
            "name": "Leg Press",
            "category": "legs",
            "price": 95000,
            "image": "https://cdn.example.com/leg.jpg",
            "unknown_column": "dropped",
        })

        assert len(product.id) == 36
        stored = next(r for r in fake_client.tables["products"] if r["id"] == product.id)
        assert "unknown_column" not in stored
        assert stored["price"] == 95000.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "data",
        [
            {"name": "", "price": 100, "image": "x.jpg"},
            {"name": "Rack", "price": 0, "image": "x.jpg"},
            {"name": "Rack", "price": 100, "image": ""},
        ],
    )
    async def test_create_product_validation(self, db, fake_client, data):
        with pytest.raises(ValueError):
            await db.catalog_admin.create_product({"category": "racks", **data})
        assert ("products", "insert") not in fake_client.calls

    @pytest.mark.asyncio
    async def test_update_replacing_image_removes_old_one(self, db, fake_client):
        new_image = "https://test.supabase.co/storage/v1/object/public/product-images/products/new.jpg"

        product = await db.catalog_admin.update_product("bench-press", {"image": new_image, "price": 18000})

        assert product.image == new_image
        assert product.price == Decimal("18000")
        assert fake_client.storage.removed == ["product-images/products/bench.jpg"]

    @pytest.mark.asyncio
    async def test_update_keeping_image_removes_nothing(self, db, fake_client):
        await db.catalog_admin.update_product("bench-press", {"name": "Bench Pro"})
        assert fake_client.storage.removed == []

    @pytest.mark.asyncio
    async def test_update_missing_product(self, db):
        assert await db.catalog_admin.update_product("nope", {"name": "X"}) is None

    @pytest.mark.asyncio
    async def test_delete_removes_image_then_row(self, db, fake_client):
        assert await db.catalog_admin.delete_product("bench-press") is True

        assert fake_client.storage.removed == ["product-images/products/bench.jpg"]
        assert all(r["id"] != "bench-press" for r in fake_client.tables["products"])

    @pytest.mark.asyncio
    async def test_delete_with_foreign_image_url(self, db, fake_client):
        """Images hosted elsewhere are left alone."""
        assert await db.catalog_admin.delete_product("treadmill-pro") is True
        assert fake_client.storage.removed == []

    @pytest.mark.asyncio
    async def test_delete_survives_storage_failure(self, db, fake_client):
        fake_client.storage.fail = True
        assert await db.catalog_admin.delete_product("bench-press") is True
        assert all(r["id"] != "bench-press" for r in fake_client.tables["products"])

    @pytest.mark.asyncio
    async def test_create_category_requires_id_and_name(self, db):
        with pytest.raises(ValueError):
            await db.catalog_admin.create_category({"id": "legs", "name": " "})
        with pytest.raises(ValueError):
            await db.catalog_admin.create_category({"id": "", "name": "Legs"})

    @pytest.mark.asyncio
    async def test_create_and_update_category(self, db):
        created = await db.catalog_admin.create_category({"id": "legs", "name": "Legs", "display_order": 4})
        updated = await db.catalog_admin.update_category("legs", {"description": "Leg machines"})

        assert created.id == "legs"
        assert updated.description == "Leg machines"

    @pytest.mark.asyncio
    async def test_save_about_updates_existing_row(self, db, fake_client):
        about = await db.catalog_admin.save_about("Our Story", "Since 2010", "about-1")

        assert about.id == "about-1"
        assert fake_client.tables["about_content"] == [{"id": "about-1", "title": "Our Story", "content": "Since 2010"}]

    @pytest.mark.asyncio
    async def test_save_about_without_id_replaces_rows(self, db, fake_client):
        fake_client.tables["about_content"].append({"id": "about-2", "title": "Dup", "content": "Dup"})

        about = await db.catalog_admin.save_about("Our Story", "Since 2010")

        rows = fake_client.tables["about_content"]
        assert len(rows) == 1
        assert rows[0]["id"] == about.id
        assert about.title == "Our Story"

    @pytest.mark.asyncio
    async def test_save_about_requires_text(self, db):
        with pytest.raises(ValueError):
            await db.catalog_admin.save_about("", "content")


class TestStoreSettingsService:
    @pytest.mark.asyncio
    async def test_list_all_with_failing_table(self, db, fake_client):
        fake_client.tables["tax_settings"] = [{"id": "t1", "state": "Goa", "tax_percentage": 12}]
        fake_client.failures.add("shipping_settings")

        settings = await db.store_settings.list_all()

        assert len(settings["tax_settings"]) == 1
        assert settings["shipping_settings"] == []
        assert settings["global_settings"] == []

    @pytest.mark.asyncio
    async def test_add_tax_setting(self, db, fake_client):
        setting = await db.store_settings.add_tax_setting("Goa", "12.5")

        assert setting.tax_percentage == Decimal("12.5")
        assert fake_client.tables["tax_settings"][0]["state"] == "Goa"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("state,rate", [("", 5), ("Goa", 0), ("Goa", -1), ("Goa", "abc")])
    async def test_add_tax_setting_validation(self, db, state, rate):
        with pytest.raises(ValueError):
            await db.store_settings.add_tax_setting(state, rate)

    @pytest.mark.asyncio
    async def test_add_shipping_setting_defaults_threshold(self, db):
        setting = await db.store_settings.add_shipping_setting("Goa", 0)

        assert setting.shipping_charge == 0
        assert setting.free_shipping_threshold == Decimal("50000")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("state,charge,threshold", [("", 100, 0), ("Goa", -1, 0), ("Goa", 100, -5)])
    async def test_add_shipping_setting_validation(self, db, state, charge, threshold):
        with pytest.raises(ValueError):
            await db.store_settings.add_shipping_setting(state, charge, threshold)

    @pytest.mark.asyncio
    async def test_delete_settings(self, db, fake_client):
        tax_setting = await db.store_settings.add_tax_setting("Goa", 12)
        ship_setting = await db.store_settings.add_shipping_setting("Goa", 100, 1000)

        await db.store_settings.delete_tax_setting(tax_setting.id)
        await db.store_settings.delete_shipping_setting(ship_setting.id)

        assert fake_client.tables["tax_settings"] == []
        assert fake_client.tables["shipping_settings"] == []

    @pytest.mark.asyncio
    async def test_update_global_setting(self, db, fake_client):
        fake_client.tables["global_settings"] = [
            {"id": "g1", "setting_key": "default_tax_percentage", "setting_value": "5"}
        ]

        assert await db.store_settings.update_global_setting("default_tax_percentage", 18) is True
        assert await db.store_settings.update_global_setting("missing_key", 1) is False
        assert fake_client.tables["global_settings"][0]["setting_value"] == "18"
