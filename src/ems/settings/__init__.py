import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "ems.settings.production"

    if env in {"test", "testing"}:
        return "ems.settings.testing"

    return "ems.settings.development"
