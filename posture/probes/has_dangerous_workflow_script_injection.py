"""
Probe - hasDangerousWorkflowScriptInjection

Flags workflows that interpolate attacker-controlled input into scripts.
"""

from typing import List

from posture.probes.base import BaseProbe
from posture.schemas.finding import Finding, Outcome
from posture.schemas.raw import DangerousWorkflowType, RawResults


class HasDangerousWorkflowScriptInjection(BaseProbe):
    name = "hasDangerousWorkflowScriptInjection"
    topics = ("dangerous_workflow_results",)

    def evaluate(self, raw: RawResults) -> List[Finding]:
        data = raw.dangerous_workflow_results
        if data.num_workflows == 0:
            return [self.finding(Outcome.NOT_APPLICABLE, "project has no workflows")]

        findings = []
        for workflow in data.workflows:
            if workflow.type != DangerousWorkflowType.SCRIPT_INJECTION:
                continue
            values = {"job": workflow.job} if workflow.job else {}
            findings.append(self.finding(
                Outcome.TRUE,
                "script injection with untrusted input",
                workflow.file.location() if workflow.file else None,
                **values,
            ))

        if not findings:
            findings.append(self.finding(
                Outcome.FALSE,
                "no script injection found in workflows",
            ))
        return findings
