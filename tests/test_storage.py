"""Tests for src.storage.client."""

import re

from src.storage.client import ImageStorage, category_image_path, path_from_public_url
from tests.conftest import PUBLIC_URL, FakeS3Client


class TestPaths:
    """Tests for object key helpers."""

    def test_category_image_path(self):
        assert category_image_path("Ii raa Caaliisaa", 1737470923362) == "categories/1737470923362_ii-raa-caaliisaa"

    def test_category_image_path_uses_current_time(self):
        assert re.match(r"^categories/\d{13}_history$", category_image_path("History"))

    def test_path_from_public_url(self):
        url = f"{PUBLIC_URL}/images/categories/1737470923362_history"
        assert path_from_public_url(url) == "categories/1737470923362_history"

    def test_path_from_empty_url(self):
        assert path_from_public_url("") is None


class TestImageStorage:
    """Tests for ImageStorage."""

    def test_upload_sets_cache_and_overwrites(self, storage, s3_client):
        storage.upload("categories/1_a", b"one", "image/png")
        storage.upload("categories/1_a", b"two", "image/png")

        assert s3_client.objects[("images", "categories/1_a")] == b"two"
        assert s3_client.put_calls[0]["CacheControl"] == "max-age=3600"
        assert s3_client.put_calls[0]["ContentType"] == "image/png"

    def test_public_url(self, storage):
        assert storage.get_public_url("categories/1_a") == f"{PUBLIC_URL}/images/categories/1_a"

    def test_upload_category_image_returns_url(self, storage, s3_client):
        url = storage.upload_category_image(b"img", "History", "image/jpeg")

        assert re.match(rf"^{PUBLIC_URL}/images/categories/\d+_history$", url)
        assert len(s3_client.objects) == 1

    def test_upload_failure_returns_empty_string(self):
        broken = ImageStorage(FakeS3Client(fail=True), "images", PUBLIC_URL)

        assert broken.upload_category_image(b"img", "History") == ""

    def test_remove_category_image(self, storage, s3_client):
        storage.upload("categories/5_x", b"img")

        assert storage.remove_category_image(storage.get_public_url("categories/5_x")) is True
        assert s3_client.objects == {}

    def test_remove_failure_is_reported(self):
        broken = ImageStorage(FakeS3Client(fail=True), "images", PUBLIC_URL)

        assert broken.remove_category_image(f"{PUBLIC_URL}/images/categories/5_x") is False
