import os
import sys

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from portfolio.i18n.locales import Locale, LocaleConfigError, LocaleRegistry, registry
from portfolio.i18n.negotiation import base_language, parse_accept_language, resolve_locale

SUPPORTED = ["es", "en"]
DEFAULT = "es"
UNSUPPORTED = ["fr", "de", "it", "pt", "ja", "zh", "ru"]


@pytest.mark.parametrize("tag", SUPPORTED)
def test_supported_tag_resolves_to_itself(tag):
    assert resolve_locale([tag], SUPPORTED, DEFAULT) == tag


@pytest.mark.parametrize("tag", UNSUPPORTED)
def test_unsupported_tag_falls_back_to_default(tag):
    assert resolve_locale([tag], SUPPORTED, DEFAULT) == DEFAULT


@pytest.mark.parametrize(
    "tag,expected",
    [("en-US", "en"), ("en-GB", "en"), ("en-AU", "en"), ("es-MX", "es"), ("es-AR", "es"), ("es-ES", "es")],
)
def test_region_suffix_is_stripped(tag, expected):
    assert resolve_locale([tag], SUPPORTED, DEFAULT) == expected


@pytest.mark.parametrize("unsupported", ["fr", "de", "it"])
@pytest.mark.parametrize("supported", SUPPORTED)
def test_first_supported_preference_wins(unsupported, supported):
    assert resolve_locale([unsupported, supported], SUPPORTED, DEFAULT) == supported


def test_matching_is_case_insensitive():
    assert resolve_locale(["EN"], SUPPORTED, DEFAULT) == resolve_locale(["en"], SUPPORTED, DEFAULT) == "en"
    assert resolve_locale(["Es-mx"], SUPPORTED, "en") == "es"


@pytest.mark.parametrize("preferences", [[], [""], ["   "], [";;;"], ["invalid"], ["null"], ["*"], None, ""])
def test_blank_or_garbage_preferences_fall_back(preferences):
    assert resolve_locale(preferences, SUPPORTED, DEFAULT) == DEFAULT


def test_weighted_preference_list():
    assert resolve_locale(["fr", "en;q=0.8"], SUPPORTED, "es") == "en"


def test_raw_header_is_parsed_in_order():
    header = "fr-CH, fr;q=0.9, en;q=0.8, es;q=0.7"
    assert resolve_locale(header, SUPPORTED, DEFAULT) == "en"


def test_quality_does_not_reorder():
    assert resolve_locale("en;q=0.1,es;q=1.0", SUPPORTED, DEFAULT) == "en"


def test_parse_accept_language():
    assert parse_accept_language("en-US,en;q=0.9 , ES") == ["en-us", "en", "es"]
    assert parse_accept_language("") == []
    assert parse_accept_language(None) == []
    assert parse_accept_language(" , ;q=1") == []


def test_base_language():
    assert base_language("en-US;q=0.8") == "en"
    assert base_language("  PT-br ") == "pt"


def test_default_must_be_supported():
    with pytest.raises(LocaleConfigError):
        resolve_locale(["en"], SUPPORTED, "fr")


def test_registry_order_and_default():
    assert registry.codes == ("es", "en")
    assert registry.default == "es"
    assert "en" in registry
    assert "fr" not in registry
    assert registry.get("en").name == "English"


def test_registry_rejects_unknown_default():
    with pytest.raises(LocaleConfigError):
        LocaleRegistry([Locale("es", "Español", "🇪🇸")], "en")
    with pytest.raises(LocaleConfigError):
        registry.with_default("de")
    assert registry.with_default("en").default == "en"
