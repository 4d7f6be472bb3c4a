"""Intermediate data models for the parse and render pipeline"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class ParsedDoc:
    """Internal parse result carrying markdown-it tokens; not persisted."""
    path:     Path
    markdown: str               # full file content
    tokens:   list              # markdown-it Token objects
    env:      dict[str, Any] = field(default_factory=dict)   # parser env; footnotes need it at render time
