"""CLI: check a PPM file against the P3 text layout written by raycore."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..image.io_ppm import validate_ppm


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate a plain-text PPM (P3) file")
    p.add_argument("path", help="PPM file to check")
    args = p.parse_args(argv)

    rep = validate_ppm(args.path)
    if rep["issues"]:
        for issue in rep["issues"]:
            print(issue)
        return 1
    print(f"OK: {rep['width']}x{rep['height']}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
