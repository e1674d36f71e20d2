from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..errors import SourceFilterError
from ..nodes.pipeline import run_from_config

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Source-filter speech waveform synthesizer")
    p.add_argument("config", type=str, help="Path to YAML config file")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        ctx = run_from_config(Path(args.config))
    except SourceFilterError as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    npz_path = ctx.get("npz_path")
    if npz_path:
        print(f"Wrote NPZ: {npz_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
