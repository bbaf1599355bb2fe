from __future__ import annotations

import logging
import sys
from typing import Optional


NAMESPACE = "interview_eval"


def setup_logging(level: str = "INFO") -> None:
    """Attach a single stdout handler to the project's logger tree."""
    project = logging.getLogger(NAMESPACE)
    for h in list(project.handlers):
        project.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    project.addHandler(handler)
    project.setLevel(level.upper())
    project.propagate = False
    # SDK transport logs each request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the project namespace, e.g. ``interview_eval.server``."""
    if not name or name == NAMESPACE or name.startswith(NAMESPACE + "."):
        return logging.getLogger(name or NAMESPACE)
    return logging.getLogger(f"{NAMESPACE}.{name}")
