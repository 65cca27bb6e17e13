import pytest

from solong.errors import (
    InvalidArgumentError,
    InvalidCharError,
    InvalidFileError,
    InvalidMapError,
    SoLongError,
    check_arg,
)


def test_check_arg_returns_path():
    assert check_arg(["so_long", "maps/level.ber"]) == "maps/level.ber"


def test_check_arg_accepts_bare_extension():
    assert check_arg(["so_long", ".ber"]) == ".ber"


@pytest.mark.parametrize(
    "argv",
    [
        ["so_long"],
        ["so_long", "a.ber", "b.ber"],
        ["so_long", ""],
        [],
    ],
)
def test_check_arg_rejects_wrong_count(argv):
    with pytest.raises(InvalidArgumentError):
        check_arg(argv)


@pytest.mark.parametrize("name", ["map.txt", "map.ber.txt", "map.BER", "ber", "x"])
def test_check_arg_rejects_wrong_extension(name):
    with pytest.raises(InvalidArgumentError):
        check_arg(["so_long", name])


def test_argument_error_is_a_game_error():
    with pytest.raises(SoLongError):
        check_arg(["so_long", "map.png"])


@pytest.mark.parametrize(
    "error, text",
    [
        (InvalidCharError, "Error, invalid characteres"),
        (InvalidMapError, "Error, invalid map"),
        (InvalidFileError, "Error, invalid fd"),
        (InvalidArgumentError, "Error, invalid argument"),
    ],
)
def test_default_messages(error, text):
    assert str(error()) == text


def test_custom_message_overrides_default():
    assert str(InvalidMapError("custom")) == "custom"