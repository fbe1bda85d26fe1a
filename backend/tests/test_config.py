"""
RecipeBox Backend: Settings Tests
===================================

What:  Tests for environment-driven configuration and its startup validation.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from recipebox.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MONGO_URI", raising=False)
        monkeypatch.delenv("MONGO_DB_NAME", raising=False)

        settings = Settings(_env_file=None)

        assert settings.mongo_uri == "mongodb://localhost:27017"
        assert settings.mongo_db_name == "recipes"
        assert (settings.cuisine_collection, settings.tags_collection, settings.recipes_collection) == (
            "cuisine",
            "tags",
            "recipes",
        )

    def test_mongo_uri_from_environment(self, monkeypatch):
        monkeypatch.setenv("MONGO_URI", "mongodb+srv://user:pw@cluster0.example.net")

        settings = Settings(_env_file=None)

        assert settings.mongo_uri == "mongodb+srv://user:pw@cluster0.example.net"

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_timeout_range(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, mongo_server_selection_timeout_ms=10)

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


class TestProductionValidation:

    def test_valid_configuration_passes(self):
        Settings(_env_file=None, mongo_uri="mongodb://db:27017").validate_required_for_production()

    def test_empty_uri_rejected(self):
        with pytest.raises(ValueError, match="MONGO_URI is not set"):
            Settings(_env_file=None, mongo_uri="").validate_required_for_production()

    def test_wrong_scheme_rejected(self):
        with pytest.raises(ValueError, match="must start with mongodb://"):
            Settings(_env_file=None, mongo_uri="postgresql://db").validate_required_for_production()
