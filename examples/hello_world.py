#!/usr/bin/env python3
# Render the 512x512 red/green scan to hello_world.ppm

from __future__ import annotations

import argparse

from raycore.image.render import RenderConfig, render_to_file
from raycore.utils.logging import setup_logging


def main() -> None:
    p = argparse.ArgumentParser(description="Write the red/green gradient test image")
    p.add_argument("--out", default="hello_world.ppm")
    args = p.parse_args()

    setup_logging()
    render_to_file(RenderConfig(width=512, height=512), args.out)


if __name__ == "__main__":
    main()
