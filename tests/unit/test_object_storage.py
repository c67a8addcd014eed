"""Tests for S3ObjectStorage URL handling"""
import pytest
from unittest.mock import MagicMock

from app.clients.object_storage import S3ObjectStorage
from app.core.config import Config


def storage(**overrides) -> S3ObjectStorage:
    settings = Config(
        _env_file=None,
        s3_bucket_name="catalog",
        s3_access_key_id="key",
        s3_secret_access_key="secret",
        **overrides,
    )
    return S3ObjectStorage(settings, client=MagicMock())


class TestPublicUrl:

    def test_public_base_url(self):
        assert storage(s3_public_base_url="https://cdn.example.com/").public_url("a/b.png") == \
            "https://cdn.example.com/a/b.png"

    def test_endpoint_path_style(self):
        assert storage(s3_endpoint_url="http://minio:9000").public_url("a/b.png") == \
            "http://minio:9000/catalog/a/b.png"

    def test_aws_default(self):
        assert storage(s3_region="eu-west-1").public_url("a/b.png") == \
            "https://catalog.s3.eu-west-1.amazonaws.com/a/b.png"


class TestKeyFromUrl:

    @pytest.mark.parametrize("url,key", [
        ("https://cdn.example.com/catalog-products/a.png", "catalog-products/a.png"),
        ("https://cdn.example.com/catalog-products/a.png?v=2#top", "catalog-products/a.png"),
        ("https://cdn.example.com/catalog-products/my%20image.png", "catalog-products/my image.png"),
    ])
    def test_public_base(self, url, key):
        assert storage(s3_public_base_url="https://cdn.example.com").key_from_url(url) == key

    def test_public_base_with_path(self):
        s = storage(s3_public_base_url="https://example.com/media")
        assert s.key_from_url("https://example.com/media/catalog-hero/x.jpg") == "catalog-hero/x.jpg"

    def test_path_style_bucket_segment(self):
        s = storage(s3_endpoint_url="http://minio:9000")
        assert s.key_from_url("http://minio:9000/catalog/catalog-hero/x.jpg") == "catalog-hero/x.jpg"

    def test_round_trip_with_public_url(self):
        s = storage(s3_endpoint_url="http://minio:9000")
        assert s.key_from_url(s.public_url("catalog-products/abc.png")) == "catalog-products/abc.png"

    @pytest.mark.parametrize("url", ["", "https://cdn.example.com/"])
    def test_no_key(self, url):
        assert storage().key_from_url(url) is None


class TestConfigured:

    def test_configured(self):
        assert storage().is_configured is True

    def test_missing_credentials(self):
        assert S3ObjectStorage(Config(_env_file=None, s3_bucket_name="catalog")).is_configured is False
