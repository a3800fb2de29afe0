import io
from unittest import mock

import matplotlib

matplotlib.use("Agg")

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
import numpy as np
import pytest

from oscope.image_viewer import ImageViewer


@pytest.fixture
def png_bytes():
    pixels = np.zeros((4, 6, 3), dtype=np.uint8)
    pixels[:, :3] = (255, 0, 0)
    pixels[:, 3:] = (0, 0, 255)
    buffer = io.BytesIO()
    mpimg.imsave(buffer, pixels, format="png")
    return buffer.getvalue()


def test_caption(png_bytes):
    viewer = ImageViewer(png_bytes, "capture.png")
    assert viewer.caption() == "File name: capture.png"


def test_pixels_decoded(png_bytes):
    viewer = ImageViewer(png_bytes, "capture.png")
    assert viewer.pixels.shape[:2] == (4, 6)
    assert viewer.pixels[0, 0, 0] == pytest.approx(1.0)
    assert viewer.pixels[0, 5, 2] == pytest.approx(1.0)


def test_save_round_trip(png_bytes, tmp_path):
    viewer = ImageViewer(png_bytes, "capture.png")
    target = viewer.save(tmp_path / "out.png")
    assert target == tmp_path / "out.png"
    reread = mpimg.imread(target)
    np.testing.assert_allclose(reread, viewer.pixels, atol=1 / 255)


def test_save_defaults_to_filename(png_bytes, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    viewer = ImageViewer(png_bytes, "default.png")
    target = viewer.save()
    assert (tmp_path / "default.png").is_file()
    assert target.name == "default.png"


def test_save_without_name_fails(png_bytes):
    viewer = ImageViewer(png_bytes, "")
    with pytest.raises(ValueError):
        viewer.save()


def test_rejects_invalid_data():
    with pytest.raises(ValueError):
        ImageViewer(b"not an image", "x.png")


def test_show_displays_image(png_bytes):
    viewer = ImageViewer(png_bytes, "a.png")
    with mock.patch("matplotlib.pyplot.show") as shown:
        fig = viewer.show()
    try:
        assert shown.call_count == 1
        assert fig.axes[0].get_title() == "File name: a.png"
        assert fig.axes[0].images[0].get_array().shape[:2] == (4, 6)
    finally:
        plt.close(fig)