"""
Probe - hasLicenseFile
"""

from typing import List

from posture.probes.base import BaseProbe
from posture.schemas.finding import Finding, Outcome
from posture.schemas.raw import RawResults


class HasLicenseFile(BaseProbe):
    name = "hasLicenseFile"
    topics = ("license_results",)

    def evaluate(self, raw: RawResults) -> List[Finding]:
        findings = []
        for license_file in raw.license_results.license_files:
            values = {"spdxID": license_file.spdx_id} if license_file.spdx_id else {}
            findings.append(self.finding(
                Outcome.TRUE,
                "project has a license file",
                license_file.file.location(),
                **values,
            ))

        if not findings:
            findings.append(self.finding(
                Outcome.FALSE,
                "project does not have a license file",
            ))
        return findings
