import pytest

from broll_organizer import config as config_module
from broll_organizer.adapters import build_search, default_adapters
from broll_organizer.adapters.envato import EnvatoSearchAdapter
from broll_organizer.adapters.gemini import GeminiScriptSegmenter
from broll_organizer.adapters.pexels import PexelsSearchAdapter
from broll_organizer.config import AppConfig
from broll_organizer.domain.errors import ConfigError

ENV_KEYS = [
    "PEXELS_API_KEY", "ENVATO_API_KEY", "GEMINI_API_KEY", "GEMINI_MODEL", "FOOTAGE_PROVIDER",
    "SEARCH_PACING_SECONDS", "SEARCH_TIMEOUT_SECONDS", "PEXELS_ORIENTATION",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda: False)


def test_defaults():
    config = AppConfig.from_env()
    assert config.provider == "pexels"
    assert config.pacing_seconds == 0.2
    assert config.gemini_model == "gemini-2.5-flash"
    assert config.pexels_orientation is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PEXELS_API_KEY", "p")
    monkeypatch.setenv("FOOTAGE_PROVIDER", "Envato")
    monkeypatch.setenv("ENVATO_API_KEY", "e")
    monkeypatch.setenv("SEARCH_PACING_SECONDS", "0.5")
    monkeypatch.setenv("PEXELS_ORIENTATION", "portrait")
    config = AppConfig.from_env()
    assert config.provider == "envato"
    assert config.provider_key() == "e"
    assert config.pacing_seconds == 0.5
    assert config.pexels_orientation == "portrait"


def test_override_wins(monkeypatch):
    monkeypatch.setenv("FOOTAGE_PROVIDER", "envato")
    assert AppConfig.from_env(provider="pexels").provider == "pexels"
    assert AppConfig.from_env(provider=None).provider == "envato"


def test_bad_number(monkeypatch):
    monkeypatch.setenv("SEARCH_PACING_SECONDS", "fast")
    with pytest.raises(ConfigError):
        AppConfig.from_env()


def test_negative_number(monkeypatch):
    monkeypatch.setenv("SEARCH_TIMEOUT_SECONDS", "-1")
    with pytest.raises(ConfigError):
        AppConfig.from_env()


def test_unknown_provider():
    with pytest.raises(ConfigError):
        AppConfig(provider="shutterstock")


def test_missing_provider_key():
    with pytest.raises(ConfigError):
        AppConfig().provider_key()


def test_repr_hides_keys():
    assert "secret" not in repr(AppConfig(pexels_api_key="secret", gemini_api_key="secret"))


def test_build_search_picks_provider():
    pexels = build_search(AppConfig(pexels_api_key="p"))
    envato = build_search(AppConfig(envato_api_key="e", provider="envato"))
    assert isinstance(pexels, PexelsSearchAdapter)
    assert isinstance(envato, EnvatoSearchAdapter)


def test_default_adapters_with_overrides():
    sentinel = object()
    adapters = default_adapters(AppConfig(pexels_api_key="p", pacing_seconds=1.5), segmenter=sentinel)
    assert adapters["segmenter"] is sentinel
    assert isinstance(adapters["search"], PexelsSearchAdapter)
    assert adapters["pacing_seconds"] == 1.5

    adapters = default_adapters(AppConfig(), search=sentinel)
    assert adapters["search"] is sentinel
    assert isinstance(adapters["segmenter"], GeminiScriptSegmenter)


@pytest.mark.parametrize("key,raw", [
    ("SEARCH_PACING_SECONDS", "nan"),
    ("SEARCH_PACING_SECONDS", "inf"),
    ("SEARCH_TIMEOUT_SECONDS", "nan"),
    ("SEARCH_TIMEOUT_SECONDS", "inf"),
    ("SEARCH_TIMEOUT_SECONDS", "0"),
])
def test_rejects_unusable_numbers(monkeypatch, key, raw):
    monkeypatch.setenv(key, raw)
    with pytest.raises(ConfigError):
        AppConfig.from_env()


def test_zero_pacing_allowed(monkeypatch):
    monkeypatch.setenv("SEARCH_PACING_SECONDS", "0")
    assert AppConfig.from_env().pacing_seconds == 0


def test_direct_construction_validates_numbers():
    with pytest.raises(ConfigError):
        AppConfig(timeout_seconds=0)
    with pytest.raises(ConfigError):
        AppConfig(pacing_seconds=float("nan"))
