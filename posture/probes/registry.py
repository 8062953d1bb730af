"""
Probes - Registry

Every available probe, keyed by its stable id.
"""

from posture.probes.base import BaseProbe
from posture.probes.has_binary_artifacts import HasBinaryArtifacts
from posture.probes.has_dangerous_workflow_script_injection import HasDangerousWorkflowScriptInjection
from posture.probes.has_dangerous_workflow_untrusted_checkout import HasDangerousWorkflowUntrustedCheckout
from posture.probes.has_license_file import HasLicenseFile
from posture.probes.security_policy_present import SecurityPolicyPresent

# Findings are reported in this order.
ALL_PROBES = {
    probe.name: probe
    for probe in (
        HasBinaryArtifacts,
        HasDangerousWorkflowScriptInjection,
        HasDangerousWorkflowUntrustedCheckout,
        HasLicenseFile,
        SecurityPolicyPresent,
    )
}


def get_probe(name: str) -> BaseProbe:
    """Instantiate a registered probe by id. Raises KeyError for unknown ids."""
    return ALL_PROBES[name]()
