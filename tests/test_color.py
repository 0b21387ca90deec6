import pytest

from cglraster.color import Color


def test_from_hex_pure_red():
    assert Color.from_hex("#ff0000") == Color(1.0, 0.0, 0.0)


def test_from_hex_without_hash_matches_with_hash():
    assert Color.from_hex("00ff7f") == Color.from_hex("#00ff7f")


def test_short_hex_expands_each_digit():
    assert Color.from_hex("#abc") == Color.from_hex("#aabbcc")


def test_from_hex_is_case_insensitive():
    assert Color.from_hex("#A1B2C3") == Color.from_hex("#a1b2c3")


@pytest.mark.parametrize("text", ["", "#12", "#12345", "#gggggg", "#1234567"])
def test_from_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        Color.from_hex(text)


def test_constants():
    assert Color.BLACK == Color(0.0, 0.0, 0.0)
    assert Color.WHITE == Color(1.0, 1.0, 1.0)


def test_to_bytes_clamps_out_of_range():
    assert Color(2.0, -1.0, 1.0).to_bytes() == bytes([255, 0, 255])


def test_hex_and_bytes_agree():
    assert Color.from_hex("#10203f").to_bytes()[0] in (0x0F, 0x10)
    assert Color.from_bytes(bytes([0x10, 0x20, 0x3F])) == Color.from_hex("#10203f")


@pytest.mark.parametrize("value", [0, 1, 17, 127, 128, 200, 254, 255])
def test_byte_round_trip_within_one_step(value):
    data = bytes([value, 255 - value, value // 2])
    back = Color.from_bytes(data).to_bytes()
    assert all(abs(a - b) <= 1 for a, b in zip(back, data))
    assert len(back) == 3


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Color.from_bytes(b"\x00\x01")


def test_arithmetic_round_trips():
    c = Color(0.2, 0.4, 0.6)
    d = Color(0.1, 0.1, 0.3)
    assert tuple((c + d) - d) == pytest.approx(tuple(c))
    assert tuple((c * 4) / 4) == pytest.approx(tuple(c))
    assert 3 * c == c * 3


def test_componentwise_multiply_with_white_is_identity():
    c = Color(0.3, 0.5, 0.7)
    assert c * Color.WHITE == c
    assert c * Color.BLACK == Color.BLACK


def test_iteration_yields_channels():
    assert list(Color(0.1, 0.2, 0.3)) == [0.1, 0.2, 0.3]