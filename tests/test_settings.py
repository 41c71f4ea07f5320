from geoconnect.config import settings as settings_module
from geoconnect.config.settings import Settings, get_logging_config, get_settings


def test_packaged_defaults_load():
    settings = get_settings()
    assert settings.globe.radius == 100
    assert settings.globe.earth_radius_km == 6371
    assert settings.globe.centroid_color == "#00ffff"
    assert len(settings.globe.palette) == 8
    assert settings.view.globe_opacity == 0.3


def test_logging_config_is_a_dict_config():
    config = get_logging_config()
    assert config["version"] == 1
    assert "console" in config["handlers"]


def test_env_overrides_are_whitelisted(monkeypatch):
    monkeypatch.setattr(settings_module, "load_dotenv_if_present", lambda: None)
    monkeypatch.setenv("GEOCONNECT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("GEOCONNECT_RESOLVER_URL", "https://resolver.test/locate")
    monkeypatch.setenv("GEOCONNECT_RESOLVER_API_KEY", "secret")

    data = settings_module._apply_env_overrides({})
    out = Settings.model_validate(data)

    assert out.app.log_level == "DEBUG"
    assert out.resolver.base_url == "https://resolver.test/locate"
    assert out.resolver.api_key == "secret"


def test_config_path_replaces_packaged_defaults(monkeypatch, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("globe:\n  radius: 250\n", encoding="utf-8")
    monkeypatch.setenv("GEOCONNECT_CONFIG_PATH", str(path))
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.globe.radius == 250
        # Sections missing from the file fall back to model defaults.
        assert settings.globe.earth_radius_km == 6371
    finally:
        monkeypatch.delenv("GEOCONNECT_CONFIG_PATH")
        get_settings.cache_clear()
