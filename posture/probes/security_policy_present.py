"""
Probe - securityPolicyPresent

Checks whether the repository (or its organization) publishes a security policy.
"""

from typing import List

from posture.probes.base import BaseProbe
from posture.schemas.finding import Finding, Outcome
from posture.schemas.raw import RawResults


class SecurityPolicyPresent(BaseProbe):
    """
    One TRUE finding per policy file, in collector order.

    Files hosted in the repository (text) and policies linked from the
    organization (URL) count the same. No files yields a single FALSE.
    """

    name = "securityPolicyPresent"
    topics = ("security_policy_results",)

    def evaluate(self, raw: RawResults) -> List[Finding]:
        findings = [
            self.finding(
                Outcome.TRUE,
                "security policy file detected",
                policy.file.location(),
            )
            for policy in raw.security_policy_results.policy_files
        ]

        if not findings:
            findings.append(self.finding(
                Outcome.FALSE,
                "no security policy file detected",
            ))
        return findings
