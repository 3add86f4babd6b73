"""Command line entry point that renders one of the demonstration scenes."""

from __future__ import annotations

import argparse

from raytrace import scenes
from raytrace.canvas import OUTPUT_DIR
from raytrace.tuples import point, vector

_SCENES = ("scene", "sphere", "clock", "tick", "checkerboard")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="raytrace",
        description="Render a demonstration scene to a PPM file in ./output.",
    )
    parser.add_argument("scene", nargs="?", default="scene", choices=_SCENES)
    parser.add_argument(
        "--texture",
        default=scenes.DEFAULT_TEXTURE,
        help="image used by the checkerboard scene",
    )
    args = parser.parse_args(argv)

    OUTPUT_DIR.mkdir(exist_ok=True)
    if args.scene == "scene":
        scenes.draw_scene()
    elif args.scene == "sphere":
        scenes.draw_sphere()
    elif args.scene == "clock":
        scenes.draw_clock(100, 100, 30.0, 0.0)
    elif args.scene == "tick":
        scenes.draw_tick(
            300,
            100,
            point(0.0, 1.0, 0.0),
            vector(5.0, 2.0, 0.0),
            vector(0.0, -0.1, 0.0),
            vector(-0.01, 0.0, 0.0),
        )
    else:
        scenes.draw_sphere_on_checkerboard(args.texture)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())