from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .buffer import Image
from .io_ppm import save_ppm


LOG = logging.getLogger(__name__)

GENERATORS = ("red_green_scan", "black")


@dataclass
class RenderConfig:
    width: int = 512
    height: int = 512
    generator: str = "red_green_scan"  # or "black"
    out: str = "hello_world.ppm"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown render config keys: {', '.join(unknown)}")
        return cls(**data)


def make_image(cfg: RenderConfig) -> Image:
    if cfg.generator == "red_green_scan":
        return Image.generate_red_green_scan(cfg.width, cfg.height)
    elif cfg.generator == "black":
        return Image.default(cfg.width, cfg.height)
    raise ValueError(f"unknown generator {cfg.generator}")


def render(cfg: RenderConfig) -> Image:
    LOG.info("Rendering %s at %dx%d", cfg.generator, cfg.width, cfg.height)
    return make_image(cfg)


def render_to_file(cfg: RenderConfig, out_path: Optional[str] = None) -> str:
    image = render(cfg)
    return save_ppm(out_path or cfg.out, image)
