"""
Persist the extraction result as the JSON document the dashboard reads.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from dto.output import ExtractionResult

logger = logging.getLogger(__name__)


def write_result(result: ExtractionResult, path: Union[str, Path]) -> Path:
    """Write *result* as UTF-8 JSON, creating parent directories."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with open(out_path, "w", encoding="utf-8") as f:
        f.write(result.to_json())

    logger.info("Output written to %s", out_path)
    return out_path
