"""
Schemas - Raw Results

Read-only facts about a repository, partitioned by analysis topic.

The collector fills one RawResults per assessment run. Every topic field
defaults to its empty value, so a topic that was never collected reads as
"no evidence". Models are frozen and sequences are tuples: probes can share
one snapshot without copying it.
"""

from enum import Enum
from pydantic import BaseModel
from typing import Optional, Tuple

from posture.schemas.finding import FileType, Location


_FROZEN = {"frozen": True}


class File(BaseModel):
    """A file (or URL) the collector observed."""
    path: str
    type: FileType = FileType.NONE
    offset: Optional[int] = None
    snippet: Optional[str] = None

    model_config = _FROZEN

    def location(self) -> Location:
        return Location(
            type=self.type,
            path=self.path,
            line_start=self.offset,
            snippet=self.snippet,
        )


class DangerousWorkflowType(str, Enum):
    UNTRUSTED_CHECKOUT = "untrustedCodeCheckout"
    SCRIPT_INJECTION = "scriptInjection"


class DangerousWorkflow(BaseModel):
    type: DangerousWorkflowType
    file: Optional[File] = None
    job: Optional[str] = None

    model_config = _FROZEN


class DangerousWorkflowData(BaseModel):
    num_workflows: int = 0
    workflows: Tuple[DangerousWorkflow, ...] = ()

    model_config = _FROZEN


class SecurityPolicyFile(BaseModel):
    file: File

    model_config = _FROZEN


class SecurityPolicyData(BaseModel):
    policy_files: Tuple[SecurityPolicyFile, ...] = ()

    model_config = _FROZEN


class LicenseFile(BaseModel):
    file: File
    spdx_id: str = ""

    model_config = _FROZEN


class LicenseData(BaseModel):
    license_files: Tuple[LicenseFile, ...] = ()

    model_config = _FROZEN


class BinaryArtifactData(BaseModel):
    files: Tuple[File, ...] = ()

    model_config = _FROZEN


class RawResults(BaseModel):
    """All collected facts, one field per topic."""
    dangerous_workflow_results: DangerousWorkflowData = DangerousWorkflowData()
    security_policy_results: SecurityPolicyData = SecurityPolicyData()
    license_results: LicenseData = LicenseData()
    binary_artifact_results: BinaryArtifactData = BinaryArtifactData()

    model_config = _FROZEN
