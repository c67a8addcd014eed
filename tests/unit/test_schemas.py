"""Tests for request schema normalization"""
import pytest
from pydantic import ValidationError

from app.schemas.auth import LoginRequest
from app.schemas.hero import HeroSlideCreate
from app.schemas.product import ProductCreate, ProductUpdate


class TestProductCreate:

    def test_optional_collections_default_empty(self):
        product = ProductCreate.model_validate(
            {"name": " Quartz ", "description": "Silica", "specifications": None, "applications": None}
        )

        assert product.name == "Quartz"
        assert product.specifications == {}
        assert product.applications == []
        assert product.featured is False

    def test_specification_values_become_strings(self):
        product = ProductCreate(name="Quartz", description="Silica", specifications={"SiO2": 99.5, "Fe2O3": None})
        assert product.specifications == {"SiO2": "99.5", "Fe2O3": ""}

    def test_blank_list_entries_dropped(self):
        product = ProductCreate(name="Quartz", description="Silica", applications=["Glass", "  ", "Foundry "])
        assert product.applications == ["Glass", "Foundry"]

    @pytest.mark.parametrize("payload", [
        {"description": "Silica"},
        {"name": "Quartz"},
        {"name": "  ", "description": "Silica"},
    ])
    def test_required_fields(self, payload):
        with pytest.raises(ValidationError):
            ProductCreate.model_validate(payload)


class TestProductUpdate:

    def test_only_present_fields(self):
        update = ProductUpdate.model_validate({"applications": ["Glass"]})
        assert update.provided_fields() == {"applications": ["Glass"]}

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            ProductUpdate.model_validate({"name": ""})


class TestHeroSlideCreate:

    def test_defaults(self):
        slide = HeroSlideCreate.model_validate({"image": " https://cdn.example.com/a.jpg ", "label": None})
        assert slide.image == "https://cdn.example.com/a.jpg"
        assert slide.label == ""
        assert slide.order is None
        assert slide.is_active is True

    def test_blank_image(self):
        with pytest.raises(ValidationError):
            HeroSlideCreate(image="  ")


class TestLoginRequest:

    def test_email_normalized(self):
        assert LoginRequest(email="Admin@Example.COM", password="x").email == "admin@example.com"
