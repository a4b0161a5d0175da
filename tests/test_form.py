"""Tests for FormInput value access"""

from focus_game_deck.config.security import SecretInput
from focus_game_deck.core.form import Field, FormInput


def test_absent_fields_return_defaults():
    form = FormInput()

    assert form.text(Field.GAME_NAME, "keep") == "keep"
    assert form.flag(Field.USE_OBS, True) is True
    assert form.items(Field.APPS_TO_MANAGE, ["a"]) == ["a"]
    assert form.secret(Field.OBS_PASSWORD) is None


def test_text_is_stripped():
    assert FormInput({Field.GAME_NAME: "  Apex \n"}).text(Field.GAME_NAME) == "Apex"
    assert FormInput({Field.GAME_NAME: None}).text(Field.GAME_NAME, "x") == ""


def test_flag_accepts_strings():
    form = FormInput({"a": "on", "b": "False", "c": 1})

    assert form.flag("a")
    assert not form.flag("b")
    assert form.flag("c")


def test_items_split_and_drop_blanks():
    form = FormInput({"names": "a| b ||c ", "list": ["x", " ", "y"]})

    assert form.items("names") == ["a", "b", "c"]
    assert form.items("list") == ["x", "y"]


def test_plain_secret_has_no_saved_marker():
    assert FormInput({Field.OBS_PASSWORD: "pw"}).secret(Field.OBS_PASSWORD) == SecretInput("pw", saved=False)


def test_repr_hides_secrets():
    form = FormInput({Field.OBS_PASSWORD: SecretInput("hunter2"), Field.OBS_HOST: "localhost"})

    assert "hunter2" not in repr(form)
    assert "localhost" in repr(form)
