from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    overlay_alpha: int = 205
    start_x: int = 1
    start_y: int = 1
    max_trace_steps: Optional[int] = None
