# ==============================================
# Record (Data Classes + Line Codec)
# ==============================================
#
# PURPOSE:
#   The per-media-item configuration record, the one-line text format
#   it is stored in, and the result objects returned by the store.
#
# CLASSES:
# --------
# - VideoConfig (dataclass)
#     - resize_mode: int           → Render-fit mode (opaque, not validated)
#     - aspect_ratio: float        → Caller-defined ratio, sentinels allowed
#     - aspect_ratio_title: str    → Label for the ratio, may be empty
#     - scale: float               → Zoom factor
#
# - LookupStatus(Enum): FOUND, NOT_FOUND, MALFORMED, READ_ERROR
#
# - ReadResult (dataclass)  → status + record (record only when FOUND)
# - WriteResult (dataclass) → ok + error message
#
# FUNCTIONS:
# ----------
# - encode_record(record) -> str
#     "<resize_mode>,<aspect_ratio>,<aspect_ratio_title>,<scale>"
#
# - decode_record(line) -> VideoConfig | None
#     None unless all four fields are present and both numbers parse.
#
# FILE FORMAT:
# ------------
#   1,1.78,16:9,1.25
#
#   Commas inside the title are NOT escaped. A title containing a comma
#   shifts the scale field and the record reads back as malformed.
#
#   Numbers are parsed strictly: no surrounding whitespace and no "_"
#   digit separators. The resize mode must be a plain decimal integer.
#
# ==============================================

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

FIELD_DELIMITER = ","
FIELD_COUNT = 4

INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class VideoConfig:
    """Display settings remembered for one media item."""
    resize_mode: int
    aspect_ratio: float
    aspect_ratio_title: str
    scale: float

    def with_scale(self, scale: float) -> "VideoConfig":
        """Copy of this record with only the scale replaced."""
        return VideoConfig(
            resize_mode=self.resize_mode,
            aspect_ratio=self.aspect_ratio,
            aspect_ratio_title=self.aspect_ratio_title,
            scale=scale,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output"""
        return {
            "resize_mode": self.resize_mode,
            "aspect_ratio": self.aspect_ratio,
            "aspect_ratio_title": self.aspect_ratio_title,
            "scale": self.scale,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VideoConfig":
        """
        Build a record from a dictionary.

        Args:
            data: Dictionary with all four record fields

        Returns:
            A VideoConfig instance
        """
        return cls(
            resize_mode=int(data["resize_mode"]),
            aspect_ratio=float(data["aspect_ratio"]),
            aspect_ratio_title=data.get("aspect_ratio_title", ""),
            scale=float(data["scale"]),
        )


class LookupStatus(Enum):
    """
    Outcome of reading a record file.

    - FOUND: A complete record was read
    - NOT_FOUND: No file exists for the key
    - MALFORMED: The file exists but does not hold a complete record
    - READ_ERROR: The file could not be read
    """
    FOUND = "found"
    NOT_FOUND = "not_found"
    MALFORMED = "malformed"
    READ_ERROR = "read_error"


@dataclass
class ReadResult:
    status: LookupStatus
    record: Optional[VideoConfig] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


@dataclass
class WriteResult:
    ok: bool
    error: Optional[str] = None


def encode_record(record: VideoConfig) -> str:
    """
    Serialize a record to its single-line text form.

    Numbers use Python's default decimal rendering, so a whole-number
    float is written as "5.0" and parses back as a float.

    Args:
        record: The record to serialize

    Returns:
        The line to write, without a trailing newline
    """
    return FIELD_DELIMITER.join([
        str(int(record.resize_mode)),
        str(float(record.aspect_ratio)),
        record.aspect_ratio_title,
        str(float(record.scale)),
    ])


def decode_record(line: str) -> Optional[VideoConfig]:
    """
    Parse one stored line back into a record.

    Args:
        line: First line of a record file, line ending already removed

    Returns:
        The record, or None if fields are missing or a number does not parse
    """
    parts = line.split(FIELD_DELIMITER, FIELD_COUNT - 1)
    if len(parts) < FIELD_COUNT:
        return None

    try:
        resize_mode = _parse_int(parts[0])
        aspect_ratio = _parse_float(parts[1])
        scale = _parse_float(parts[3])
    except ValueError:
        return None

    return VideoConfig(
        resize_mode=resize_mode,
        aspect_ratio=aspect_ratio,
        aspect_ratio_title=parts[2],
        scale=scale,
    )


def _parse_int(text: str) -> int:
    if not INT_PATTERN.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    return int(text)


def _parse_float(text: str) -> float:
    if "_" in text or text != text.strip():
        raise ValueError(f"not a plain float: {text!r}")
    return float(text)
