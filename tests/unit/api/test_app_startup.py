import logging

import pytest

from config import INSECURE_ADMIN_SIGNUP_SECRET, INSECURE_JWT_SECRET, ApplicationConfig
from eventuraa.api.app import create_app


class DevelopmentDefaults(ApplicationConfig):
    ENVIRONMENT = "development"
    LOG_LEVEL = "INFO"
    JWT_SECRET = INSECURE_JWT_SECRET
    ADMIN_SIGNUP_SECRET = INSECURE_ADMIN_SIGNUP_SECRET


class ProductionWithDefaults(DevelopmentDefaults):
    ENVIRONMENT = "production"


class ProductionConfigured(ApplicationConfig):
    ENVIRONMENT = "production"
    LOG_LEVEL = "INFO"
    JWT_SECRET = "a-real-jwt-secret"
    ADMIN_SIGNUP_SECRET = "a-real-admin-secret"


def test_insecure_defaults_are_logged_in_development(caplog):
    caplog.set_level(logging.WARNING, logger="eventuraa.api.app")

    create_app(DevelopmentDefaults)

    warnings = [r for r in caplog.records if r.name == "eventuraa.api.app" and r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "JWT_SECRET" in warnings[0].getMessage()
    assert "ADMIN_SIGNUP_SECRET" in warnings[0].getMessage()


def test_production_refuses_insecure_defaults():
    with pytest.raises(RuntimeError, match="JWT_SECRET, ADMIN_SIGNUP_SECRET"):
        create_app(ProductionWithDefaults)


def test_production_starts_with_real_secrets(caplog):
    caplog.set_level(logging.WARNING, logger="eventuraa.api.app")

    app = create_app(ProductionConfigured)

    assert app.title == "Eventuraa API"
    assert not [r for r in caplog.records if r.name == "eventuraa.api.app"]
