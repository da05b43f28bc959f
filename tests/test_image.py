import pytest

from workbench.imaging.image import Image, Pixel, PpmError

SAMPLE = "P3\n2 2\n255\n255 0 0 0 255 0 \n0 0 255 255 255 255 \n"


def test_new_image_is_black():
    img = Image(3, 2)
    assert (img.width, img.height) == (3, 2)
    assert all(img[r, c] == Pixel(0, 0, 0) for r in range(2) for c in range(3))


@pytest.mark.parametrize("width,height", [(0, 2), (2, 0), (-1, -1)])
def test_non_positive_size_rejected(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_read_pixels_from_ppm():
    img = Image.from_ppm(SAMPLE)
    assert (img.width, img.height) == (2, 2)
    assert img[0, 0] == Pixel(255, 0, 0)
    assert img[0, 1] == Pixel(0, 255, 0)
    assert img[1, 0] == Pixel(0, 0, 255)
    assert img[1, 1] == Pixel(255, 255, 255)


def test_ppm_round_trip_is_exact():
    assert Image.from_ppm(SAMPLE).to_ppm() == SAMPLE


def test_any_whitespace_is_accepted():
    messy = "P3   2\t2\n\n255 255 0 0\n0 255 0 0 0 255\t255 255 255"
    assert Image.from_ppm(messy) == Image.from_ppm(SAMPLE)


def test_output_always_declares_255():
    img = Image.from_ppm("P3 1 1 100 10 20 30")
    assert img.to_ppm() == "P3\n1 1\n255\n10 20 30 \n"


def test_written_image_reads_back_equal():
    img = Image(3, 2)
    img[0, 2] = Pixel(1, 2, 3)
    img[1, 0] = Pixel(40, 50, 60)
    again = Image.from_ppm(img.to_ppm())
    assert again == img
    assert again[0, 2] == Pixel(1, 2, 3)


def test_ppm_rows_end_with_space_newline():
    text = Image(4, 3).to_ppm()
    lines = text.splitlines(keepends=True)
    assert lines[:3] == ["P3\n", "4 3\n", "255\n"]
    assert len(lines) == 6
    assert all(line.endswith(" \n") for line in lines[3:])


@pytest.mark.parametrize("text", ["", "P6 1 1 255 0 0 0", "p3 1 1 255 0 0 0"])
def test_bad_header_rejected(text):
    with pytest.raises(PpmError):
        Image.from_ppm(text)


@pytest.mark.parametrize(
    "text", ["P3 2 2 255 1 2 3", "P3 1", "P3 1 1 255 1 x 3", "P3 0 1 255", "P3 a 1 255 0 0 0"]
)
def test_malformed_body_rejected(text):
    with pytest.raises(PpmError):
        Image.from_ppm(text)


def test_ppm_error_is_value_error():
    with pytest.raises(ValueError):
        Image.from_ppm("P2 1 1 255 0")


def test_set_then_get_pixel():
    img = Image(2, 3)
    img[2, 1] = Pixel(7, 8, 9)
    assert img[2, 1] == Pixel(7, 8, 9)
    assert img.red_channel[2, 1] == 7
    assert img.green_channel[2, 1] == 8
    assert img.blue_channel[2, 1] == 9
    assert img[0, 0] == Pixel(0, 0, 0)


@pytest.mark.parametrize("key", [(3, 0), (0, 2), (-1, 0)])
def test_out_of_range_pixel_raises(key):
    img = Image(2, 3)
    with pytest.raises(IndexError):
        img[key]
    with pytest.raises(IndexError):
        img[key] = Pixel(1, 1, 1)


def test_fill_sets_every_pixel():
    img = Image(4, 2)
    color = Pixel(12, 34, 56)
    img.fill(color)
    assert all(img[r, c] == color for r in range(2) for c in range(4))


def test_equality_depends_on_pixels():
    a = Image.from_ppm(SAMPLE)
    b = Image.from_ppm(SAMPLE)
    assert a == b
    b[0, 0] = Pixel(0, 0, 0)
    assert not a == b