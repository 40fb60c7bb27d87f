import os

import matplotlib.pyplot as plt
import numpy as np
import pytest
from PIL import Image

from shapes import Point, disk, outside, ring
from plotting import RasterConfig, rasterize, render_gallery, render_to_axes, render_to_file


def test_render_to_file_roundtrip(tmpdir):
    out_path = os.path.join(str(tmpdir), "nested", "disk.png")
    shape = disk(Point(4, 4), 2)
    cfg = RasterConfig(foreground=(200, 10, 10))
    assert render_to_file(shape, out_path, 9, 7, config=cfg) is None
    with Image.open(out_path) as img:
        loaded = np.asarray(img.convert("RGBA"))
    np.testing.assert_array_equal(loaded, rasterize(shape, 9, 7, config=cfg).data)


def test_render_to_file_returns_image():
    img = render_to_file(disk(Point(1, 1), 1), None, 3, 3)
    assert isinstance(img, Image.Image)
    assert img.size == (3, 3)


def test_render_to_file_rejects_empty_buffer(tmpdir):
    with pytest.raises(ValueError):
        render_to_file(disk(Point(0, 0), 1), os.path.join(str(tmpdir), "x.png"), 0, 5)


def test_render_to_axes():
    fig, ax = plt.subplots()
    render_to_axes(ax, ring(Point(5, 5), 4, 2), 11, 11, title="ring")
    images = ax.get_images()
    assert len(images) == 1
    assert images[0].get_array().shape == (11, 11, 4)
    assert ax.get_title() == "ring"
    plt.close(fig)


def test_render_gallery(tmpdir):
    out_path = os.path.join(str(tmpdir), "gallery.png")
    shapes = [disk(Point(5, 5), 3), outside(disk(Point(5, 5), 3)), ring(Point(5, 5), 4, 2), disk(Point(0, 0), 4)]
    render_gallery(shapes, out_path, 10, 10, cols=3, titles=["a", "b", "c", "d"])
    assert os.path.exists(out_path)


def test_render_gallery_requires_shapes(tmpdir):
    with pytest.raises(ValueError):
        render_gallery([], os.path.join(str(tmpdir), "g.png"), 10, 10)
