"""Tests for image upload validation and bucket storage"""
import re

import pytest

from core.errors import ERROR_IMAGE_TOO_LARGE, ERROR_NOT_AN_IMAGE, ImageValidationError, RemoteCallError
from core.services.storage import ImageStorage, build_object_path, validate_image
from tests.fakes import FakeSupabaseClient

MB = 1024 * 1024


class TestValidateImage:
    def test_accepts_image_under_limit(self):
        validate_image("image/png", 5 * MB)

    @pytest.mark.parametrize("content_type", [None, "", "application/pdf", "text/plain"])
    def test_rejects_non_images(self, content_type):
        with pytest.raises(ImageValidationError, match=ERROR_NOT_AN_IMAGE):
            validate_image(content_type, 10)

    def test_rejects_oversized(self):
        with pytest.raises(ImageValidationError, match=ERROR_IMAGE_TOO_LARGE):
            validate_image("image/jpeg", 5 * MB + 1)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_image("video/mp4", 1)


class TestObjectPath:
    def test_layout(self):
        path = build_object_path("products", "Front View.JPG")
        assert re.fullmatch(r"products/\d{13}-[a-z0-9]{11}\.jpg", path)

    def test_unique(self):
        assert build_object_path("products", "a.png") != build_object_path("products", "a.png")


class TestImageStorage:
    @pytest.fixture
    def client(self):
        return FakeSupabaseClient()

    @pytest.fixture
    def storage(self, client):
        return ImageStorage(client, bucket="product-images")

    @pytest.mark.asyncio
    async def test_upload_returns_public_url(self, storage, client):
        url = await storage.upload("categories", "cardio.webp", b"\x00" * 10, "image/webp")

        assert url.startswith("https://test.supabase.co/storage/v1/object/public/product-images/categories/")
        assert url.endswith(".webp")
        assert len(client.storage.objects) == 1

    @pytest.mark.asyncio
    async def test_invalid_upload_never_reaches_storage(self, storage, client):
        with pytest.raises(ImageValidationError):
            await storage.upload("products", "doc.pdf", b"x", "application/pdf")
        assert client.storage.objects == {}

    @pytest.mark.asyncio
    async def test_upload_failure_raises_remote_error(self, storage, client):
        client.storage.fail = True
        with pytest.raises(RemoteCallError):
            await storage.upload("products", "a.png", b"x", "image/png")

    def test_path_from_public_url(self, storage):
        url = "https://test.supabase.co/storage/v1/object/public/product-images/products/a%20b.png"
        assert storage.path_from_public_url(url) == "products/a b.png"

    @pytest.mark.parametrize(
        "url",
        ["", "https://cdn.example.com/a.png", "https://test.supabase.co/storage/v1/object/public/other-bucket/a.png"],
    )
    def test_foreign_urls_ignored(self, storage, url):
        assert storage.path_from_public_url(url) is None

    @pytest.mark.asyncio
    async def test_remove_by_url(self, storage, client):
        url = await storage.upload("products", "a.png", b"x", "image/png")

        assert await storage.remove_by_url(url) is True
        assert client.storage.objects == {}

    @pytest.mark.asyncio
    async def test_remove_by_url_is_best_effort(self, storage, client):
        client.storage.fail = True
        url = "https://test.supabase.co/storage/v1/object/public/product-images/products/a.png"
        assert await storage.remove_by_url(url) is False
