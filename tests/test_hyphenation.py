import pytest

from safevoikko import HyphenateError
from safevoikko.hyphenation import apply_mask, graphemes


def test_hyphenate(voikko):
    assert voikko.hyphenate("koira") == "koi-ra"
    assert voikko.hyphenate("kuningas") == "ku-nin-gas"


def test_custom_hyphen(voikko):
    assert voikko.hyphenate("kuningas", "\u00ad") == "ku\u00adnin\u00adgas"
    assert voikko.hyphenate("koira", "<br>") == "koi<br>ra"


def test_replacing_break_point(voikko):
    assert voikko.hyphens("vaa'an") == "   =  "
    assert voikko.hyphenate("vaa'an") == "vaa-an"


def test_raw_mask(voikko, engine):
    assert voikko.hyphens("koira") == "   - "
    engine.assert_all_freed()


def test_null_mask_is_an_error(voikko):
    with pytest.raises(HyphenateError):
        voikko.hyphens("tuntematon")
    with pytest.raises(HyphenateError):
        voikko.hyphenate("tuntematon")


def test_empty_hyphen_gives_back_the_word():
    assert apply_mask("kuningas", "  -  -  ", "") == "kuningas"
    assert apply_mask("koira", "     ", "") == "koira"


@pytest.mark.parametrize("word,mask", [
    ("kuningas", "  -  -  "),
    ("koira", "   - "),
    ("ääneen", "  -   "),
    ("syy", "   "),
])
def test_removing_hyphens_restores_the_word(word, mask):
    hyphenated = apply_mask(word, mask, "|")
    assert hyphenated.replace("|", "") == word
    assert hyphenated.count("|") == mask.count("-")


def test_alignment_is_by_grapheme():
    # 'e' + COMBINING ACUTE is one user-perceived character
    word = "cafe\u0301ja"
    assert len(graphemes(word)) == 6
    assert apply_mask(word, "    - ", "-") == "cafe\u0301-ja"


def test_code_point_mask_for_decomposed_word(voikko, engine, caplog):
    word = "kahve\u0301la"
    # one mask symbol per code point: 8 symbols for 7 clusters
    engine.masks[word] = " " * len(word)
    assert voikko.hyphens(word) == " " * 8
    with caplog.at_level("WARNING", logger="safevoikko.hyphenation"):
        assert voikko.hyphenate(word) == word
    assert "8 clusters" in caplog.text
    engine.assert_all_freed()


def test_mask_longer_than_word_keeps_leading_break_points():
    assert apply_mask("cafe\u0301ja", "    -  ", "-") == "cafe\u0301-ja"


def test_unknown_mask_symbol_keeps_character():
    assert apply_mask("koira", "   ? ", "-") == "koira"
