"""Demonstration entry point: ``python -m enumerant.main``.

Prints the different renderings of ``QuantityType.LENGTH`` and the equality
checks that tie a member to its integer value and to its lookups.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from enumerant.config.loader import load_app_config
from enumerant.measure import Measurer, QuantityType
from enumerant.telemetry import configure_logging


def demo_lines() -> list[str]:
    length = QuantityType.LENGTH
    return [
        f"QuantityType.LENGTH : {length}",
        f"QuantityType.LENGTH.name : {length.name}",
        f"QuantityType.LENGTH.value : {length.value}",
        f"str(QuantityType.LENGTH) : {str(length)}",
        f"int(QuantityType.LENGTH) : {int(length)}",
        str(length == 1),
        str(length == QuantityType.get(1)),
        str(length == QuantityType.get("length")),
    ]


def _resolve_config_path() -> Optional[Path]:
    env_path = os.environ.get("ENUMERANT_CONFIG")
    return Path(env_path) if env_path else None


def main() -> int:
    config = load_app_config(_resolve_config_path())
    log_dir = Path(config.telemetry.log_dir) if config.telemetry.log_dir else None
    logger = configure_logging(level=config.telemetry.log_level, log_dir=log_dir)
    measurer = Measurer(config.demo.measurement_system)
    logger.info(
        "Running enum demo",
        extra={"measurement_system": measurer.system.name, "quantity_types": QuantityType.keys()},
    )
    for line in demo_lines():
        print(line)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as exc:  # pragma: no cover - top-level safety
        print(f"Fatal error: {exc}", file=sys.stderr)
        raise
