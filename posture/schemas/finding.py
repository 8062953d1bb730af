"""
Schemas - Finding Models

Typed outcomes produced by probes.
"""

from enum import Enum
from pydantic import BaseModel
from typing import Dict, Optional


class Outcome(str, Enum):
    """Verdict attached to a finding."""
    TRUE = "True"
    FALSE = "False"
    NOT_APPLICABLE = "NotApplicable"
    NOT_AVAILABLE = "NotAvailable"
    NOT_SUPPORTED = "NotSupported"
    ERROR = "Error"


class FileType(str, Enum):
    """Kind of file a location points at."""
    NONE = "none"
    SOURCE = "source"
    BINARY = "binary"
    TEXT = "text"
    URL = "url"


class Location(BaseModel):
    """Where the evidence for a finding lives."""
    type: FileType = FileType.NONE
    path: str
    line_start: Optional[int] = None
    snippet: Optional[str] = None

    model_config = {"frozen": True}


class Finding(BaseModel):
    """One outcome unit produced by a probe."""
    probe: str
    outcome: Outcome
    message: str = ""
    location: Optional[Location] = None
    values: Dict[str, str] = {}

    model_config = {"frozen": True}
