from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional, Sequence, Tuple

from shapes import (
    Point,
    Shape,
    MONOID_UNION,
    MONOID_INTERSECTION,
    disk,
    outside,
    ring,
    mickeymouse,
)
from plotting import RasterConfig, render_to_file, render_gallery


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Rasterize the example shape compositions to PNG.")
    p.add_argument("--size", type=int, default=400, help="canvas width and height in pixels (default: 400)")
    p.add_argument("--outdir", type=str, default="plots/shapes", help="output directory for the images")
    p.add_argument("--workers", type=int, default=1, help="threads used to rasterize each image")
    p.add_argument(
        "--color",
        type=int,
        nargs=3,
        default=[0, 0, 0],
        metavar=("R", "G", "B"),
        help="foreground color (default: 0 0 0)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = p.parse_args(argv)
    if args.size < 1:
        p.error(f"--size must be >= 1, got {args.size}")
    if args.workers < 1:
        p.error(f"--workers must be >= 1, got {args.workers}")
    return args


def build_examples() -> List[Tuple[str, Shape]]:
    c = Point(200, 200)
    left = disk(Point(150, 200), 100)
    right = disk(Point(250, 200), 100)
    return [
        ("disk", disk(c, 100)),
        ("outside", outside(disk(c, 100))),
        ("union", MONOID_UNION.combine(left, right)),
        ("intersection", MONOID_INTERSECTION.combine(left, right)),
        ("ring", ring(c, 100, 50)),
        ("mickeymouse", MONOID_UNION.concat_all(mickeymouse())),
    ]


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    cfg = RasterConfig(foreground=tuple(args.color), workers=args.workers)
    os.makedirs(args.outdir, exist_ok=True)

    examples = build_examples()
    saved = []
    for name, shape in examples:
        out_path = os.path.join(args.outdir, f"{name}.png")
        render_to_file(shape, out_path, args.size, args.size, config=cfg)
        saved.append(out_path)

    gallery_path = os.path.join(args.outdir, "gallery.png")
    render_gallery(
        [s for _, s in examples],
        gallery_path,
        args.size,
        args.size,
        titles=[n for n, _ in examples],
        config=cfg,
    )
    saved.append(gallery_path)

    print("Saved plots to:")
    for path in saved:
        print(f" - {path}")


if __name__ == "__main__":
    main()
