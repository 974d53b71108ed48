"""
Exception hierarchy for the letterbox pipeline.

Per-image failures carry the phase that failed (opening, decoding, creating,
encoding) so the final log line says where a conversion broke.
"""
from typing import Optional


class LetterboxError(Exception):
    """Base class for every error raised by letterbox."""


class ConfigError(LetterboxError):
    """Invalid run configuration (bad flag values)."""


class AspectParseError(ConfigError):
    """Aspect ratio string is not of the form ``A:B`` with positive numbers."""


class DiscoveryError(LetterboxError):
    """Listing the input directory failed."""


class AmbiguousStatError(LetterboxError):
    """
    Stat-ing the source or destination failed with something other than
    a clean not-found (permissions, disk errors...).
    """

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"cannot stat {path!r}: {cause}")
        self.path = path
        self.cause = cause


class PhaseError(LetterboxError):
    """Error raised while converting a single image, tagged with its phase."""

    phase = "processing"

    def __init__(self, cause: BaseException, phase: Optional[str] = None):
        if phase is not None:
            self.phase = phase
        super().__init__(f"{self.phase}: {cause}")
        self.cause = cause


class LetterboxIOError(PhaseError):
    phase = "opening"


class DecodeError(PhaseError):
    phase = "decoding"


class EncodeError(PhaseError):
    phase = "encoding"


class TaskError(LetterboxError):
    """Raised by the dispatcher for the first image that failed."""

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"error converting {path!r}: {cause}")
        self.path = path
        self.cause = cause
