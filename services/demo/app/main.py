from __future__ import annotations

import os
import sys
from typing import Callable

from libs.numerics import factorial as numerics_factorial
from libs.numerics import logging as core_logging
from libs.numerics import multiples
from libs.numerics.models import MultipleScan

SERVICE_NAME = "factorial-demo"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FACTORIAL_INPUT = 6

LOGGER = core_logging.get_logger(SERVICE_NAME)


def run(write: Callable[[str], None] = print) -> None:
    result = numerics_factorial.compute(FACTORIAL_INPUT)
    core_logging.log_event(LOGGER, "factorial_computed", result.model_dump())
    write(result.line())

    scan = MultipleScan()
    core_logging.log_event(LOGGER, "multiples_scan_started", scan.model_dump())
    multiples.print_multiples(scan, write=write)


def main() -> int:
    core_logging.configure_logging(SERVICE_NAME, LOG_LEVEL)
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
