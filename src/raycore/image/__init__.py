from .pixel import Pixel, saturate_channel
from .buffer import Image, ImageCoordinate
from .io_ppm import save_ppm, load_ppm, parse_ppm, validate_ppm

__all__ = [
    "Pixel",
    "saturate_channel",
    "Image",
    "ImageCoordinate",
    "save_ppm",
    "load_ppm",
    "parse_ppm",
    "validate_ppm",
]
