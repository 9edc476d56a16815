"""Testes das configurações do importador."""
from unittest.mock import patch

import pytest

from hubspot_importer.config import Config
from hubspot_importer.object_types import ObjectType


def test_validate_config_requires_token():
    with patch.object(Config, "HUBSPOT_API_KEY", ""):
        assert Config.validate_config() is False

    with patch.object(Config, "HUBSPOT_API_KEY", "pat-na1-123"):
        assert Config.validate_config() is True


def test_validate_config_rejects_invalid_worker_count():
    with patch.object(Config, "HUBSPOT_API_KEY", "pat-na1-123"), \
            patch.object(Config, "MAX_CONCURRENT_REQUESTS", 0):
        assert Config.validate_config() is False


def test_properties_url_follows_overrides():
    with patch.object(Config, "HUBSPOT_DEAL_PROPERTIES_URL", "http://localhost/deals"):
        assert Config.get_properties_url(ObjectType.DEAL) == "http://localhost/deals"


def test_properties_url_rejects_unknown_kind():
    with pytest.raises(ValueError):
        Config.get_properties_url("company")
