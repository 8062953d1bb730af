"""
Probes Module - Rule Evaluation

Pure, single-topic analyses over a RawResults snapshot.
"""

from posture.probes.base import BaseProbe
from posture.probes.has_binary_artifacts import HasBinaryArtifacts
from posture.probes.has_dangerous_workflow_script_injection import HasDangerousWorkflowScriptInjection
from posture.probes.has_dangerous_workflow_untrusted_checkout import HasDangerousWorkflowUntrustedCheckout
from posture.probes.has_license_file import HasLicenseFile
from posture.probes.security_policy_present import SecurityPolicyPresent
from posture.probes.registry import ALL_PROBES, get_probe
from posture.probes.runner import ProbeRunner

__all__ = [
    "BaseProbe",
    "HasBinaryArtifacts",
    "HasDangerousWorkflowScriptInjection",
    "HasDangerousWorkflowUntrustedCheckout",
    "HasLicenseFile",
    "SecurityPolicyPresent",
    "ALL_PROBES",
    "get_probe",
    "ProbeRunner",
]
