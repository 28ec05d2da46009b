"""Staged conversion of Chinese text into pinyin."""

from .models import AllData, SyllableCandidate, SyllableParts, SyllableRecord
from .options import Options, normalize_options
from .pipeline import (
    convert,
    convert_all_readings,
    convert_to_details,
    convert_to_list,
    convert_to_string,
)

__all__ = [
    "AllData",
    "Options",
    "SyllableCandidate",
    "SyllableParts",
    "SyllableRecord",
    "convert",
    "convert_all_readings",
    "convert_to_details",
    "convert_to_list",
    "convert_to_string",
    "normalize_options",
]
