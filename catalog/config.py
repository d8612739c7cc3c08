from __future__ import annotations

from dataclasses import dataclass
import logging


@dataclass(frozen=True)
class CatalogConfig:
    # the interactive menu never created triangles; keep that unless asked
    allow_triangle: bool = False
    render_cols: int = 4
    render_resolution: int = 300
    log_level: int = logging.WARNING
