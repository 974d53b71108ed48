from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RunOptions:
    """Run-wide settings shared read-only by every task."""
    output_dir: str
    white: bool
    ratio: float
    force: bool = False


@dataclass(frozen=True)
class ImageTask:
    """One source image to convert. Immutable, consumed by a single worker."""
    path: str
    options: RunOptions


class TaskOutcome(Enum):
    PROCESSED = "processed"
    SKIPPED = "skipped"
