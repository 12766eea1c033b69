import pytest

from dotargs.exceptions import ArgumentRegistrationError, ArgumentTypeError
from dotargs.parser import Argument, ArgumentKind
from dotargs.parser.argument import format_value


def test_kind_from_string_and_aliases():
    assert ArgumentKind("flag") is ArgumentKind.FLAG
    assert ArgumentKind(" Choice ") is ArgumentKind.SET
    assert ArgumentKind("list") is ArgumentKind.COLLECTION
    assert str(ArgumentKind.OPTION) == "option"
    with pytest.raises(ValueError):
        ArgumentKind("nope")
    with pytest.raises(ValueError):
        ArgumentKind(3)


@pytest.mark.parametrize(
    "kind,value_type,needs_value,multiple,placeholder",
    [
        (ArgumentKind.FLAG, bool, False, False, None),
        (ArgumentKind.OPTION, str, True, False, "OPTION"),
        (ArgumentKind.SET, str, True, False, "OPTION"),
        (ArgumentKind.COLLECTION, tuple, True, True, "COLLECTION"),
    ],
)
def test_kind_properties(kind, value_type, needs_value, multiple, placeholder):
    assert kind.value_type is value_type
    assert kind.needs_value is needs_value
    assert kind.supports_multiple_values is multiple
    assert kind.placeholder == placeholder


def test_kind_string_is_accepted_by_argument():
    arg = Argument("bool")
    assert arg.kind is ArgumentKind.FLAG
    with pytest.raises(ArgumentRegistrationError):
        Argument("nope")


def test_required_drops_default():
    assert Argument.option("x", required=True).default is None
    assert Argument.flag(True, required=True).default is None
    assert Argument.option("x", required=True).get_value() is None


def test_flag_defaults():
    arg = Argument.flag()
    assert arg.default is False
    assert arg.get_value() is False
    assert Argument.flag(True).get_value() is True
    with pytest.raises(ArgumentRegistrationError):
        Argument.flag("yes")


def test_flag_set_and_validate():
    arg = Argument.flag()
    arg.set_value(True)
    assert arg.get_value() is True
    assert arg.validate(True)
    assert arg.validate(False)
    assert not arg.validate(None)
    assert not arg.validate("true")
    with pytest.raises(ArgumentTypeError):
        arg.set_value("true")


def test_option_validator():
    arg = Argument.option(validator=lambda value: value is None or value.isdigit())
    assert arg.validate("42")
    assert not arg.validate("abc")
    assert arg.validate(None)
    assert Argument.option().validate("anything")


def test_option_rejects_non_string_values():
    arg = Argument.option()
    with pytest.raises(ArgumentTypeError):
        arg.set_value(5)
    with pytest.raises(ArgumentRegistrationError):
        Argument.option(5)


def test_choice_validation():
    arg = Argument.choice(["a", "b"])
    assert arg.validate("a")
    assert not arg.validate("c")
    assert not arg.validate(None)
    assert arg.choices == ("a", "b")


def test_choice_with_validator_must_pass_both():
    arg = Argument.choice(["a", "bb"], validator=lambda value: len(value) == 1)
    assert arg.validate("a")
    assert not arg.validate("bb")


def test_choice_declaration_errors():
    with pytest.raises(ArgumentRegistrationError):
        Argument.choice([])
    with pytest.raises(ArgumentRegistrationError):
        Argument.choice(["a"], "z")
    with pytest.raises(ArgumentRegistrationError):
        Argument.option(choices=("a",))


def test_collection_appends_and_resets():
    arg = Argument.collection()
    assert arg.get_value() == ()
    arg.set_value("a")
    arg.set_value("b")
    snapshot = arg.get_value()
    assert snapshot == ("a", "b")
    arg.set_value("c")
    assert snapshot == ("a", "b")
    arg.reset()
    assert arg.get_value() == ()
    assert arg.is_empty()


def test_collection_takes_no_default():
    with pytest.raises(ArgumentRegistrationError):
        Argument(ArgumentKind.COLLECTION, default=("a",))


@pytest.mark.parametrize("position", [-1, 1.5, True])
def test_invalid_position(position):
    with pytest.raises(ArgumentRegistrationError):
        Argument.option(position=position)


def test_reset_restores_default():
    arg = Argument.option("x")
    arg.set_value("y")
    arg.reset()
    assert arg.get_value() == "x"


@pytest.mark.parametrize(
    "arg,expected",
    [
        (Argument.flag(), "[/v, False]"),
        (Argument.option("root"), "[/v=OPTION, root]"),
        (Argument.option(), "[/v=OPTION]"),
        (Argument.option(""), "[/v=OPTION]"),
        (Argument.option(required=True), "</v=OPTION>"),
        (Argument.option("x", placeholder="IP"), "[/v=IP, x]"),
        (Argument.collection(), "[/v=COLLECTION]"),
        (Argument.choice(["a", "b"], "a"), "[/v=OPTION, a]"),
    ],
)
def test_describe(arg, expected):
    assert arg.describe("v") == expected


def test_info_text():
    assert Argument.option(required=True).get_info_text() == "Required"
    assert Argument.option().get_info_text() == "Optional"
    assert Argument.option("root").get_info_text() == "Optional, Default value: root"
    assert Argument.flag().get_info_text() == "Optional, Default value: False"


def test_equality_is_identity():
    a1 = Argument.option("x")
    a2 = Argument.option("x")
    assert a1 == a1
    assert a1 != a2


def test_format_value():
    assert format_value(None) == ""
    assert format_value(("a", "b c")) == "a,b c"
    assert format_value(False) == "False"
    assert format_value("x") == "x"
