"""
Adapters – concrete implementations of ports.
Pexels and Envato implement IFootageSearch; Gemini implements IScriptSegmenter.
"""

from broll_organizer.adapters.envato import EnvatoSearchAdapter
from broll_organizer.adapters.gemini import GeminiScriptSegmenter
from broll_organizer.adapters.pexels import PexelsSearchAdapter
from broll_organizer.config import AppConfig


def build_search(config: AppConfig):
    """Footage provider selected by config.provider."""
    key = config.provider_key()
    if config.provider == "envato":
        return EnvatoSearchAdapter(key, timeout_sec=config.timeout_seconds)
    return PexelsSearchAdapter(
        key,
        timeout_sec=config.timeout_seconds,
        orientation=config.pexels_orientation,
    )


def default_adapters(config: AppConfig, **overrides):
    """
    Build default adapter instances from config.
    Overrides: search=..., segmenter=... for testing or another provider.
    """
    defaults = {}
    if "search" not in overrides:
        defaults["search"] = build_search(config)
    if "segmenter" not in overrides:
        defaults["segmenter"] = GeminiScriptSegmenter(config.gemini_api_key, model=config.gemini_model)
    defaults["pacing_seconds"] = config.pacing_seconds
    defaults.update(overrides)
    return defaults
