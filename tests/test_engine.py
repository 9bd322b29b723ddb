"""Tests against a real libvoikko with a Finnish dictionary.

Skipped when the library or the dictionary is not installed.
"""

import re

import pytest

from dictdata import DictionaryDir, DictionaryInfo
from safevoikko import InitError, SpellResult, TokenType, Voikko, list_dicts

pytestmark = pytest.mark.engine

BCP47 = re.compile(r"^[a-z]{2,3}(-[A-Za-z0-9]{1,8})*$")


def test_spell(finnish):
    assert finnish.spell("kuningas") == SpellResult.OK
    assert finnish.spell("adfasdf") == SpellResult.FAILED


def test_suggest(finnish):
    suggestions = finnish.suggest("kisse")
    assert suggestions
    assert suggestions == finnish.suggest("kisse")


def test_analyze_unknown_word(finnish):
    assert finnish.analyze("adfasdf") == []


def test_analyze(finnish):
    analyses = finnish.analyze("kissa")
    assert any(a.get("BASEFORM") == "kissa" for a in analyses)


def test_hyphenate(finnish):
    mask = finnish.hyphens("kuningas")
    assert len(mask) == len("kuningas")
    assert finnish.hyphenate("kuningas", "").replace("-", "") == "kuningas"
    assert finnish.hyphenate("kuningas").replace("-", "") == "kuningas"


def test_tokens_cover_non_ascii_text(finnish):
    text = "Pöytä ja tuoli, ääneen!"
    tokens = finnish.tokens(text)
    assert "".join(t.text for t in tokens) == text
    assert tokens[0].text == "Pöytä"
    assert tokens[0].type == TokenType.WORD


def test_sentences_cover_text(finnish):
    text = "Äiti söi. Öljyä ääriään myöten."
    assert "".join(s.text for s in finnish.sentences(text)) == text


def test_grammar_errors_terminate(finnish):
    errors = finnish.grammar_errors("Minä olen olen täällä.")
    ends = [e.start_pos + e.length for e in errors]
    assert ends == sorted(ends)


def test_list_dicts(real_library):
    dicts = list_dicts("", library=real_library)
    if not dicts:
        pytest.skip("no dictionaries installed")
    assert BCP47.match(dicts[0].language)


def test_list_dicts_from_path(real_library, tmp_path):
    info = DictionaryInfo("test-variant-name", "Some test description sakldjasd", morphology="null")
    dict_dir = DictionaryDir(tmp_path)
    dict_dir.add(info)
    dicts = list_dicts(dict_dir.path, library=real_library)
    matching = [d for d in dicts if d.variant == info.variant]
    assert len(matching) == 1
    assert matching[0].description == info.description
    assert matching[0].language == "fi"


def test_init_error_for_missing_language(real_library, tmp_path):
    with pytest.raises(InitError):
        Voikko("xx-x-nonexistent", path=str(tmp_path), library=real_library)


def test_version(real_library):
    assert re.match(r"^\d+\.\d+", Voikko.version(library=real_library))
