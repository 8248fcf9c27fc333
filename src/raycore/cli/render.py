"""CLI: render a procedural image and save it as plain-text PPM.

Usage examples:

  python -m raycore.cli.render --out out/scan.ppm --width 256 --height 128
  python -m raycore.cli.render --config render.yaml --progress
"""

from __future__ import annotations

import argparse
import logging
import os
import time
from typing import List, Optional

from ..image.render import GENERATORS, RenderConfig, render_to_file
from ..utils.config import dump_config, load_config
from ..utils.logging import format_duration, log_runtime_env, setup_logging


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Render a procedural image and save it as P3 PPM")
    p.add_argument("--out", default=None, help="Output .ppm path (default: hello_world.ppm)")
    p.add_argument("--width", type=int, default=None)
    p.add_argument("--height", type=int, default=None)
    p.add_argument("--generator", choices=list(GENERATORS), default=None)
    p.add_argument("--config", default=None, help="JSON or YAML file with RenderConfig fields")
    p.add_argument("--progress", action="store_true", help="Show progress bars while writing")
    p.add_argument("--log-level", default="INFO")
    args = p.parse_args(argv)

    setup_logging(args.log_level)
    log_runtime_env()
    if args.progress:
        os.environ["RAYCORE_PROGRESS"] = "1"

    values = load_config(args.config) if args.config else {}
    for key in ("out", "width", "height", "generator"):
        v = getattr(args, key)
        if v is not None:
            values[key] = v
    cfg = RenderConfig.from_dict(values)
    logging.info("Config: %s", dump_config(cfg))

    t0 = time.perf_counter()
    out = render_to_file(cfg)
    logging.info("Wrote image: %s (%s)", out, format_duration(time.perf_counter() - t0))


if __name__ == "__main__":  # pragma: no cover
    main()
