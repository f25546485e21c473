import math

import pytest
from PIL import Image

from ursa.app import load_image, rotation_z

IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _column(matrix, index):
    return matrix[4 * index: 4 * index + 4]


def _multiply(a, b):
    return tuple(
        sum(a[k * 4 + row] * b[col * 4 + k] for k in range(4))
        for col in range(4)
        for row in range(4)
    )


@pytest.fixture
def sample_png(tmp_path):
    path = tmp_path / "sample.png"
    image = Image.new("RGB", (2, 3), (10, 20, 30))
    image.putpixel((0, 0), (255, 0, 0))
    image.putpixel((0, 2), (0, 0, 255))
    image.save(path)
    return path


def test_load_image_flips_rows(sample_png):
    width, height, data = load_image(sample_png, 3)
    assert (width, height) == (2, 3)
    assert len(data) == width * height * 3
    row = width * 3
    assert data[:3] == bytes((0, 0, 255))
    assert data[(height - 1) * row:(height - 1) * row + 3] == bytes((255, 0, 0))


def test_load_image_adds_opaque_alpha(sample_png):
    width, height, data = load_image(sample_png, 4)
    assert len(data) == width * height * 4
    assert all(alpha == 255 for alpha in data[3::4])


def test_load_image_grayscale_size(sample_png):
    width, height, data = load_image(sample_png, 1)
    assert len(data) == width * height


def test_load_image_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_image(tmp_path / "absent.png", 3)


def test_load_image_not_an_image(tmp_path):
    path = tmp_path / "junk.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(OSError):
        load_image(path, 3)


@pytest.mark.parametrize("channels", [0, 5])
def test_load_image_rejects_channel_count(sample_png, channels):
    with pytest.raises(ValueError):
        load_image(sample_png, channels)


def test_rotation_zero_is_identity():
    assert rotation_z(0.0) == IDENTITY


def test_quarter_turn_maps_x_to_y():
    matrix = rotation_z(math.pi / 2)
    assert _column(matrix, 0) == pytest.approx((0.0, 1.0, 0.0, 0.0), abs=1e-12)
    assert _column(matrix, 1) == pytest.approx((-1.0, 0.0, 0.0, 0.0), abs=1e-12)


@pytest.mark.parametrize("angle", [0.3, 1.0, 2.5, -4.0])
def test_rotation_is_orthonormal_and_keeps_z(angle):
    matrix = rotation_z(angle)
    x, y = _column(matrix, 0), _column(matrix, 1)
    assert sum(a * a for a in x) == pytest.approx(1.0)
    assert sum(a * a for a in y) == pytest.approx(1.0)
    assert sum(a * b for a, b in zip(x, y)) == pytest.approx(0.0, abs=1e-12)
    assert _column(matrix, 2) == (0.0, 0.0, 1.0, 0.0)
    assert _column(matrix, 3) == (0.0, 0.0, 0.0, 1.0)


def test_rotations_compose():
    combined = _multiply(rotation_z(0.4), rotation_z(0.9))
    assert combined == pytest.approx(rotation_z(1.3), abs=1e-12)


def test_rotation_and_inverse_cancel():
    assert _multiply(rotation_z(0.7), rotation_z(-0.7)) == pytest.approx(IDENTITY, abs=1e-12)