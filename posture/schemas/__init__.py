"""
Schemas Module - Pydantic Models

Data models for code search, repository identity, raw facts and findings.
"""

from posture.schemas.search import SearchRequest, SearchResult, SearchResponse
from posture.schemas.repo import HEAD_SHA, RepoIdentity
from posture.schemas.finding import FileType, Finding, Location, Outcome
from posture.schemas.raw import (
    BinaryArtifactData,
    DangerousWorkflow,
    DangerousWorkflowData,
    DangerousWorkflowType,
    File,
    LicenseData,
    LicenseFile,
    RawResults,
    SecurityPolicyData,
    SecurityPolicyFile,
)

__all__ = [
    "SearchRequest",
    "SearchResult",
    "SearchResponse",
    "HEAD_SHA",
    "RepoIdentity",
    "FileType",
    "Finding",
    "Location",
    "Outcome",
    "BinaryArtifactData",
    "DangerousWorkflow",
    "DangerousWorkflowData",
    "DangerousWorkflowType",
    "File",
    "LicenseData",
    "LicenseFile",
    "RawResults",
    "SecurityPolicyData",
    "SecurityPolicyFile",
]
