import pytest

from fairdice.dice import DiceParser, Die
from fairdice.errors import ConfigurationError, InvalidDiceSpec

from conftest import CLASSIC_SPECS


def test_parse_keeps_face_order_and_repeats():
    die = Die.parse("2,2,4,4,9,9")
    assert die.faces == (2, 2, 4, 4, 9, 9)
    assert die.sides() == 6
    assert len(die) == 6
    assert str(die) == "2,2,4,4,9,9"


def test_parse_accepts_whitespace_and_negative_faces():
    assert Die.parse(" 1, -2 ,3").faces == (1, -2, 3)


def test_single_face_die():
    die = Die.parse("7")
    assert die.sides() == 1
    assert die.get_face(0) == 7
    assert die.get_face(41) == 7


@pytest.mark.parametrize("spec", ["", "   ", "1,a,3", "1,,2", "1.5,2", "1,2,"])
def test_parse_rejects_bad_specs(spec):
    with pytest.raises(InvalidDiceSpec):
        Die.parse(spec)


def test_get_face_wraps_modulo_sides():
    die = Die.parse("1,2,3,4,5")
    for i in range(die.sides()):
        for k in range(4):
            assert die.get_face(i) == die.get_face(i + k * die.sides())
    assert die.get_face(-1) == 5


def test_dice_compare_by_identity():
    a = Die.parse("1,2,3")
    b = Die.parse("1,2,3")
    assert a != b
    assert a == a
    assert [a, b].index(b) == 1


def test_faces_are_immutable():
    die = Die.parse("1,2,3")
    with pytest.raises(AttributeError):
        die.faces = (4, 5, 6)
    with pytest.raises(TypeError):
        die.faces[0] = 9


def test_parser_builds_all_dice():
    dice = DiceParser.parse(CLASSIC_SPECS)
    assert [d.faces for d in dice] == [
        (2, 2, 4, 4, 9, 9), (1, 1, 6, 6, 8, 8), (3, 3, 5, 5, 7, 7),
    ]


def test_parser_allows_different_side_counts():
    dice = DiceParser.parse(["1,2,3,4", "1,2,3,4,5,6", "2,2,2"])
    assert [d.sides() for d in dice] == [4, 6, 3]


def test_parser_requires_three_dice():
    with pytest.raises(ConfigurationError) as excinfo:
        DiceParser.parse(CLASSIC_SPECS[:2])
    assert "at least 3 dice" in str(excinfo.value)
    assert "Example usage" in str(excinfo.value)


def test_parser_wraps_invalid_die_as_configuration_error():
    with pytest.raises(ConfigurationError) as excinfo:
        DiceParser.parse(["1,2,3", "4,x,6", "7,8,9"])
    assert "Die #2" in excinfo.value.message
    assert isinstance(excinfo.value.__cause__, InvalidDiceSpec)


@pytest.mark.parametrize("spec", ["1_000,2,3", "\u0663,1,2", "1,2,\uff13"])
def test_parse_rejects_non_ascii_digits(spec):
    with pytest.raises(InvalidDiceSpec):
        Die.parse(spec)


def test_parse_accepts_signed_faces():
    assert Die.parse("+5,-3,0").faces == (5, -3, 0)
