import pytest

from wools.errors import InvalidHintsError, InvalidTokenError, InvalidWordError
from wools.feedback import Hint
from wools.hints import format_hints, parse_guess_and_hints, parse_hints

C, P, A = Hint.CORRECT, Hint.PRESENT, Hint.ABSENT


@pytest.mark.parametrize("text", ["bgybb", "BGYBB", "02100", "[0, 2, 1, 0, 0]", " bgybb\n"])
def test_parse_hints_accepted_forms(text):
    assert parse_hints(text) == (A, C, P, A, A)


@pytest.mark.parametrize("text", ["bgyb", "bgybbb", "[0, 2, 1]"])
def test_parse_hints_wrong_length(text):
    with pytest.raises(InvalidHintsError):
        parse_hints(text)


def test_parse_hints_unknown_symbol():
    with pytest.raises(InvalidHintsError, match="'x'"):
        parse_hints("bgxbb")


def test_format_hints():
    assert format_hints((A, C, P, A, A)) == "bgybb"
    assert format_hints([2, 2, 2, 2, 2]) == "ggggg"


def test_parse_guess_and_hints():
    guess, hints = parse_guess_and_hints("Coupe:bbbyg")
    assert guess == "coupe"
    assert hints == (A, A, A, P, C)


@pytest.mark.parametrize("token", ["coupebbbyg", "coupe:bbbyg:x", ""])
def test_parse_guess_and_hints_separator(token):
    with pytest.raises(InvalidTokenError):
        parse_guess_and_hints(token)


def test_parse_guess_and_hints_bad_halves():
    with pytest.raises(InvalidWordError):
        parse_guess_and_hints("cup:bbbyg")
    with pytest.raises(InvalidHintsError):
        parse_guess_and_hints("coupe:bbby")


@pytest.mark.parametrize("text", ["[0, 1, 2, 2, 0, 3]", "[10, 2, 1, 0]", "[0,1,x,2,2,0]"])
def test_parse_hints_list_form_rejects_extra_or_merged_items(text):
    with pytest.raises(InvalidHintsError, match="exactly 5"):
        parse_hints(text)


@pytest.mark.parametrize("text,item", [("[0, 1, x, 2, 2]", "'x'"), ("[0, 1, 3, 2, 2]", "'3'"),
                                       ("[0, 1, , 2, 2]", "''"), ("[10, 2, 1, 0, 0]", "'10'")])
def test_parse_hints_list_form_names_bad_item(text, item):
    with pytest.raises(InvalidHintsError, match=item):
        parse_hints(text)
