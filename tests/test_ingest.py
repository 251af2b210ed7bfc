import os
import sys

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import json
import logging

import pytest

from portfolio import config
from portfolio.i18n.locales import registry
from portfolio.ingest.coverage import coverage_frame, find_incomplete, flatten_messages
from portfolio.ingest.loader import MessageLoader, MissingLocaleError, UnsupportedLocaleError
from portfolio.ingest.validators import (
    CompletenessError,
    MissingKeyError,
    SchemaValidationError,
    ensure_complete,
    ensure_string_leaves,
)
from portfolio.services.content import ContentService

ES = {"hero": {"title": "Hola"}, "footer": {"terms": "Términos"}}
EN = {"hero": {"title": "Hello"}, "footer": {"terms": "Terms"}}


def write_messages(path, **dictionaries):
    for code, tree in dictionaries.items():
        (path / f"{code}.json").write_text(json.dumps(tree, ensure_ascii=False), encoding="utf-8")


def test_flatten_marks_leaves_and_branches():
    flat = flatten_messages({"a": {"b": "x", "c": {"d": "y"}}, "e": "z"})
    assert flat == {"a": "branch", "a.b": "leaf", "a.c": "branch", "a.c.d": "leaf", "e": "leaf"}


def test_incomplete_rows_cover_missing_and_shape_mismatch():
    es = {"a": {"b": "x"}, "c": "y"}
    en = {"a": {"b": "x"}, "c": {"d": "z"}}
    frame = coverage_frame({"es": es, "en": en})
    assert list(frame.columns) == ["es", "en"]
    incomplete = find_incomplete(frame)
    assert set(incomplete.index) == {"c", "c.d"}
    with pytest.raises(CompletenessError) as exc:
        ensure_complete({"es": es, "en": en})
    assert exc.value.keys == ["c", "c.d"]


def test_symmetric_dictionaries_are_complete():
    frame = ensure_complete({"es": ES, "en": EN})
    assert find_incomplete(frame).empty
    assert len(frame.index) == 4


@pytest.mark.parametrize("tree", [{"a": 1}, {"a": ["x"]}, {"a": {"b": None}}, {"a.b": "x"}])
def test_non_string_leaves_rejected(tree):
    with pytest.raises(SchemaValidationError):
        ensure_string_leaves(tree, "es")


def test_loader_reads_packaged_messages():
    bundle = MessageLoader(config.MESSAGES_DIR, registry).load()
    assert bundle.locales == ["es", "en"]
    assert bundle.default_locale == "es"
    assert bundle.incomplete.empty
    assert "projects.items.defi.title" in bundle.coverage.index


def test_loader_missing_locale_file(tmp_path):
    write_messages(tmp_path, es=ES)
    with pytest.raises(MissingLocaleError):
        MessageLoader(tmp_path, registry).load()


def test_loader_rejects_non_object_root(tmp_path):
    write_messages(tmp_path, es=ES)
    (tmp_path / "en.json").write_text("[]", encoding="utf-8")
    with pytest.raises(SchemaValidationError):
        MessageLoader(tmp_path, registry).load()


def test_loader_strict_rejects_incomplete(tmp_path):
    write_messages(tmp_path, es=ES, en={"hero": {"title": "Hello"}})
    loader = MessageLoader(tmp_path, registry)
    with pytest.raises(CompletenessError):
        loader.load()
    assert loader.get_cached_bundle() is None


def test_loader_lenient_keeps_report(tmp_path, caplog):
    write_messages(tmp_path, es=ES, en={"hero": {"title": "Hello"}})
    loader = MessageLoader(tmp_path, registry, strict=False)
    with caplog.at_level(logging.WARNING):
        bundle = loader.load()
    assert set(bundle.incomplete.index) == {"footer", "footer.terms"}
    assert "incomplete" in caplog.text
    # no fallback to another locale for the gap
    assert bundle.translate("en", "footer.terms") == "footer.terms"


def test_reload_hooks_receive_bundle():
    seen = []
    loader = MessageLoader(config.MESSAGES_DIR, registry, reload_hooks=[seen.append])
    bundle = loader.load_from_dicts({"es": ES, "en": EN, "fr": {"hero": {"title": "Salut"}}})
    assert seen == [bundle]
    assert bundle.locales == ["es", "en"]
    assert loader.translator("en")("hero.title") == "Hello"


def test_translator_for_unknown_locale():
    loader = MessageLoader(config.MESSAGES_DIR, registry)
    with pytest.raises(MissingLocaleError):
        loader.translator("en")
    loader.load_from_dicts({"es": ES, "en": EN})
    with pytest.raises(UnsupportedLocaleError):
        loader.translator("fr")


def test_failed_reload_hook_keeps_previous_state():
    service = ContentService()
    loader = MessageLoader(config.MESSAGES_DIR, registry, reload_hooks=[service.reindex])
    previous = loader.load()
    assert service.bundle is previous

    with pytest.raises(MissingKeyError):
        loader.load_from_dicts({"es": {"x": "y"}, "en": {"x": "z"}})

    assert loader.get_cached_bundle() is previous
    assert service.bundle is loader.get_cached_bundle()
    assert loader.translator("en")("metadata.title") == "Software Developer - Portfolio"
    assert service.projects("en")[0]["title"] == "DeFi Protocol Dashboard"


def test_failed_hook_rolls_back_earlier_hooks():
    seen = []

    def reject(bundle):
        if "x" in bundle.dictionaries["en"]:
            raise RuntimeError("rejected")

    loader = MessageLoader(config.MESSAGES_DIR, registry, reload_hooks=[seen.append, reject])
    previous = loader.load_from_dicts({"es": ES, "en": EN})
    with pytest.raises(RuntimeError):
        loader.load_from_dicts({"es": {"x": "y"}, "en": {"x": "z"}})
    assert loader.get_cached_bundle() is previous
    assert seen[-1] is previous
    assert len(seen) == 3
