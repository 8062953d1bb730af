"""
Probe - hasBinaryArtifacts

Checked-in binaries cannot be reviewed; each one is reported separately.
"""

from typing import List

from posture.probes.base import BaseProbe
from posture.schemas.finding import Finding, Outcome
from posture.schemas.raw import RawResults


class HasBinaryArtifacts(BaseProbe):
    name = "hasBinaryArtifacts"
    topics = ("binary_artifact_results",)

    def evaluate(self, raw: RawResults) -> List[Finding]:
        findings = [
            self.finding(Outcome.TRUE, "binary artifact detected", f.location())
            for f in raw.binary_artifact_results.files
        ]

        if not findings:
            findings.append(self.finding(
                Outcome.FALSE,
                "repository has no binary artifacts",
            ))
        return findings
