from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class ConvertContext:
    """
    Shared conversion context.
    This object is passed between orchestration layers.
    """

    config: Any
    logger: Any

    input_path: Optional[Path] = None
    output_path: Optional[Path] = None

    stats: Dict[str, Any] = field(default_factory=dict)
    skipped: list = field(default_factory=list)

    debug: bool = False
