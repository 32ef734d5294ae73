import pytest

from ohmimetro.leds import (
    Color,
    Direction,
    LedMatrix,
    Pixel,
    arrow_frame,
    color_pixel,
    encode_frame,
    line_frame,
    matrix_rgb,
    rotate_frame,
)

BLACK = Pixel(0, 0, 0)


def _marked(index):
    return tuple(Pixel(1, 2, 3) if i == index else BLACK for i in range(25))


def _lit(frame):
    return {i for i, p in enumerate(frame) if p != BLACK}


class _Recorder:
    def __init__(self):
        self.words = []
        self.sleeps = []

    def put(self, word):
        self.words.append(word)

    def sleep(self, ms):
        self.sleeps.append(ms)


@pytest.mark.parametrize("r,g,b", [(255, 0, 0), (0, 255, 0), (0, 0, 255), (12, 34, 56)])
def test_matrix_rgb_channel_layout(r, g, b):
    word = matrix_rgb(r, g, b, 1.0)
    assert (word >> 24) & 0xFF == g
    assert (word >> 16) & 0xFF == r
    assert (word >> 8) & 0xFF == b
    assert word & 0xFF == 0


def test_matrix_rgb_truncates_scaled_value():
    assert (matrix_rgb(255, 0, 0, 0.5) >> 16) & 0xFF == 127


def test_matrix_rgb_zero_intensity_is_dark():
    assert matrix_rgb(255, 255, 255, 0) == 0


def test_encode_frame_length_and_values():
    frame = [Pixel(10, 20, 30)] * 25
    words = encode_frame(frame, 1.0)
    assert len(words) == 25
    assert set(words) == {matrix_rgb(10, 20, 30, 1.0)}


def test_encode_frame_rejects_wrong_size():
    with pytest.raises(ValueError):
        encode_frame([BLACK] * 24, 1.0)


def test_rotate_moves_top_left_to_top_right():
    assert _lit(rotate_frame(_marked(0), 1)) == {4}


def test_rotate_four_times_is_identity():
    frame = tuple(Pixel(i, 0, 0) for i in range(25))
    assert rotate_frame(frame, 4) == frame
    assert rotate_frame(frame, 0) == frame


def test_rotate_composes():
    frame = tuple(Pixel(i, 25 - i, 0) for i in range(25))
    three = rotate_frame(rotate_frame(rotate_frame(frame, 1), 1), 1)
    assert three == rotate_frame(frame, 3)
    assert rotate_frame(frame, 5) == rotate_frame(frame, 1)


def test_rotate_keeps_centre():
    assert rotate_frame(_marked(12), 1) == _marked(12)


def test_color_pixel_values_from_table():
    assert color_pixel(Color.BLACK) == Pixel(0, 0, 0)
    assert color_pixel(Color.RED) == Pixel(255, 0, 0)
    assert color_pixel(Color.VIOLET) == Pixel(121, 8, 205)
    assert color_pixel(Color.BROWN) == Pixel(165, 25, 0)


def test_color_labels():
    assert Color(0).label == "Preto"
    assert Color(2).label == "Vermelho"
    assert Color(9).label == "Branco"


def test_north_arrow_pattern():
    frame = arrow_frame(Direction.NORTH, Color.GREEN)
    assert _lit(frame) == {2, 7, 10, 12, 14, 16, 17, 18, 22}
    assert all(frame[i] == Pixel(0, 255, 0) for i in _lit(frame))


@pytest.mark.parametrize("direction,turns", [
    (Direction.SOUTH, 2), (Direction.EAST, 3), (Direction.WEST, 1),
])
def test_straight_arrows_are_rotations(direction, turns):
    north = arrow_frame(Direction.NORTH, Color.BLUE)
    assert arrow_frame(direction, Color.BLUE) == rotate_frame(north, turns)


def test_diagonal_arrows_pair_by_rotation():
    assert arrow_frame(Direction.SOUTHWEST, Color.RED) == rotate_frame(
        arrow_frame(Direction.NORTHEAST, Color.RED), 2)
    assert arrow_frame(Direction.SOUTHEAST, Color.RED) == rotate_frame(
        arrow_frame(Direction.NORTHWEST, Color.RED), 2)


def test_diagonal_arrow_corner():
    assert 4 in _lit(arrow_frame(Direction.NORTHEAST, Color.WHITE))
    assert 0 in _lit(arrow_frame(Direction.NORTHWEST, Color.WHITE))


def test_arrow_unsupported_color_falls_back_to_red():
    frame = arrow_frame(Direction.NORTH, Color.YELLOW)
    assert {frame[i] for i in _lit(frame)} == {Pixel(255, 0, 0)}


def test_line_frame_rows():
    colors = [Color.BROWN, Color.BLACK, Color.ORANGE]
    frame = line_frame(colors)
    for row, color in enumerate(colors):
        assert frame[row * 5:row * 5 + 5] == (color_pixel(color),) * 5
    assert frame[15:] == (BLACK,) * 10


def test_line_frame_needs_three_colors():
    with pytest.raises(ValueError):
        line_frame([Color.RED, Color.RED])


def test_led_matrix_draw_line_sends_encoded_frame():
    rec = _Recorder()
    colors = [Color.YELLOW, Color.VIOLET, Color.RED]
    LedMatrix(rec.put, rec.sleep).draw_line(colors)
    assert rec.words == encode_frame(line_frame(colors), 0.05)


def test_led_matrix_draw_arrow_sends_encoded_frame():
    rec = _Recorder()
    LedMatrix(rec.put, rec.sleep).draw_arrow(Direction.EAST, Color.GREEN)
    assert rec.words == encode_frame(arrow_frame(Direction.EAST, Color.GREEN), 0.125)


def test_led_matrix_test_pattern():
    rec = _Recorder()
    LedMatrix(rec.put, rec.sleep).test_pattern()
    assert len(rec.words) == 26 * 25
    assert rec.sleeps == [50] * 26
    assert rec.words[-25:] == [0] * 25
    full_red = rec.words[24 * 25:25 * 25]
    assert full_red == [matrix_rgb(255, 0, 0, 0.5)] * 25
    first = rec.words[:25]
    assert first[0] == matrix_rgb(255, 0, 0, 0.5)
    assert first[1:] == [0] * 24