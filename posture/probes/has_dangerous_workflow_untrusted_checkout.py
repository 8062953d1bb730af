"""
Probe - hasDangerousWorkflowUntrustedCheckout

Does any workflow check out untrusted code in a privileged context?
"""

from typing import List

from posture.probes.base import BaseProbe
from posture.schemas.finding import Finding, Outcome
from posture.schemas.raw import DangerousWorkflowType, RawResults


class HasDangerousWorkflowUntrustedCheckout(BaseProbe):
    """One aggregate finding per run, regardless of how many workflows match."""

    name = "hasDangerousWorkflowUntrustedCheckout"
    topics = ("dangerous_workflow_results",)

    def evaluate(self, raw: RawResults) -> List[Finding]:
        matches = [
            w for w in raw.dangerous_workflow_results.workflows
            if w.type == DangerousWorkflowType.UNTRUSTED_CHECKOUT
        ]

        if not matches:
            return [self.finding(
                Outcome.FALSE,
                "no workflow checks out untrusted code",
            )]

        first = matches[0]
        values = {"count": str(len(matches))}
        if first.job:
            values["job"] = first.job
        return [self.finding(
            Outcome.TRUE,
            f"untrusted code checkout found in {len(matches)} workflow(s)",
            first.file.location() if first.file else None,
            **values,
        )]
