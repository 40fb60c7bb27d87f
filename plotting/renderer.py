from __future__ import annotations

from typing import Optional, Sequence
import os
import matplotlib.pyplot as plt
from PIL import Image

from shapes import Shape
from plotting.raster import RasterConfig, rasterize


def render_to_axes(
    ax,
    shape: Shape,
    width: int,
    height: int,
    title: Optional[str] = None,
    config: Optional[RasterConfig] = None,
    show_axes: bool = False,
) -> None:
    buf = rasterize(shape, width, height, config=config)
    # canvas convention: (0, 0) is the top-left pixel
    ax.imshow(
        buf.data,
        extent=(0, max(buf.width, 1), max(buf.height, 1), 0),
        interpolation="none",
        aspect="equal",
    )
    if title:
        ax.set_title(title)
    if show_axes:
        ax.set_xticks([])
        ax.set_yticks([])
    else:
        ax.axis("off")


def render_to_file(
    shape: Shape,
    out_path: Optional[str],
    width: int,
    height: int,
    config: Optional[RasterConfig] = None,
) -> Optional[Image.Image]:
    """
    Rasterize `shape` and write it as a PNG. With out_path=None the
    PIL image is returned instead of being saved.
    """
    buf = rasterize(shape, width, height, config=config)
    if buf.is_empty():
        raise ValueError(f"cannot encode an empty {buf.width}x{buf.height} buffer as PNG")
    img = buf.to_image()
    if out_path is None:
        return img
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(out_path, format="PNG")
    return None


def render_gallery(
    shapes: Sequence[Shape],
    out_path: str,
    width: int,
    height: int,
    cols: int = 3,
    titles: Optional[Sequence[str]] = None,
    config: Optional[RasterConfig] = None,
    figsize_per_cell: tuple[float, float] = (3.0, 3.0),
) -> None:
    """
    Draw several shapes side by side on a matplotlib grid and save it.
    """
    n = len(shapes)
    if n == 0:
        raise ValueError("No shapes provided")
    cols = max(1, min(cols, n))
    rows = (n + cols - 1) // cols
    fig, axes = plt.subplots(
        rows, cols,
        figsize=(figsize_per_cell[0] * cols, figsize_per_cell[1] * rows),
        constrained_layout=True,
        squeeze=False,
    )
    fig.patch.set_facecolor("white")

    for idx, shape in enumerate(shapes):
        ax = axes[idx // cols, idx % cols]
        title = titles[idx] if titles is not None and idx < len(titles) else f"{idx}"
        render_to_axes(ax, shape, width, height, title=title, config=config, show_axes=True)

    for idx in range(n, rows * cols):
        axes[idx // cols, idx % cols].axis("off")

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fmt = "svg" if out_path.endswith(".svg") else "png"
    fig.savefig(out_path, dpi=150, format=fmt, facecolor="white")
    plt.close(fig)
