"""
Unit Tests for Probes Module
"""

import threading

import pytest
from pydantic import ValidationError

from posture.config import Settings
from posture.errors import NilInputError, PostureError
from posture.probes import (
    ALL_PROBES,
    BaseProbe,
    HasBinaryArtifacts,
    HasDangerousWorkflowScriptInjection,
    HasDangerousWorkflowUntrustedCheckout,
    HasLicenseFile,
    ProbeRunner,
    SecurityPolicyPresent,
    get_probe,
)
from posture.schemas import (
    BinaryArtifactData,
    DangerousWorkflow,
    DangerousWorkflowData,
    DangerousWorkflowType,
    File,
    FileType,
    LicenseData,
    LicenseFile,
    Outcome,
    RawResults,
    SecurityPolicyData,
    SecurityPolicyFile,
)


def outcomes(findings):
    return [f.outcome for f in findings]


def workflows(*types, num_workflows=3):
    return RawResults(
        dangerous_workflow_results=DangerousWorkflowData(
            num_workflows=num_workflows,
            workflows=[
                DangerousWorkflow(
                    type=t,
                    file=File(path=f".github/workflows/w{i}.yml", type=FileType.SOURCE, offset=i + 1),
                    job=f"job{i}",
                )
                for i, t in enumerate(types)
            ],
        )
    )


def policies(*types):
    return RawResults(
        security_policy_results=SecurityPolicyData(
            policy_files=[
                SecurityPolicyFile(file=File(path="SECURITY.md", type=t)) for t in types
            ]
        )
    )


class TestNilInput:
    """Every registered probe rejects a missing snapshot."""

    @pytest.mark.parametrize("probe_id", list(ALL_PROBES))
    def test_nil_raw(self, probe_id):
        """Test the nil-input error for every probe."""
        with pytest.raises(NilInputError):
            get_probe(probe_id).run(None)

    @pytest.mark.parametrize("probe_id", list(ALL_PROBES))
    def test_empty_raw_is_not_an_error(self, probe_id):
        """Test that an empty snapshot means no evidence, and the id matches."""
        findings, returned_id = get_probe(probe_id).run(RawResults())

        assert returned_id == probe_id
        assert len(findings) >= 1
        assert all(f.probe == probe_id for f in findings)


class TestHasDangerousWorkflowUntrustedCheckout:
    """Tests for the untrusted checkout probe."""

    def test_no_untrusted_checkout(self):
        """Test three workflows none of which do untrusted checkout."""
        findings, probe_id = HasDangerousWorkflowUntrustedCheckout().run(
            workflows(DangerousWorkflowType.SCRIPT_INJECTION)
        )

        assert probe_id == HasDangerousWorkflowUntrustedCheckout.name
        assert outcomes(findings) == [Outcome.FALSE]

    def test_untrusted_checkout(self):
        """Test three workflows one of which has an untrusted checkout."""
        findings, _ = HasDangerousWorkflowUntrustedCheckout().run(
            workflows(DangerousWorkflowType.UNTRUSTED_CHECKOUT)
        )

        assert outcomes(findings) == [Outcome.TRUE]
        assert findings[0].location.path == ".github/workflows/w0.yml"
        assert findings[0].location.line_start == 1

    def test_single_finding_for_many_matches(self):
        """Test that several matching workflows still yield one finding."""
        findings, _ = HasDangerousWorkflowUntrustedCheckout().run(
            workflows(
                DangerousWorkflowType.SCRIPT_INJECTION,
                DangerousWorkflowType.UNTRUSTED_CHECKOUT,
                DangerousWorkflowType.UNTRUSTED_CHECKOUT,
            )
        )

        assert outcomes(findings) == [Outcome.TRUE]
        assert findings[0].values["count"] == "2"
        assert findings[0].location.path == ".github/workflows/w1.yml"

    def test_independent_of_num_workflows(self):
        """Test that the workflow count does not influence the outcome."""
        findings, _ = HasDangerousWorkflowUntrustedCheckout().run(
            workflows(DangerousWorkflowType.UNTRUSTED_CHECKOUT, num_workflows=0)
        )

        assert outcomes(findings) == [Outcome.TRUE]


class TestHasDangerousWorkflowScriptInjection:
    """Tests for the script injection probe."""

    def test_no_workflows(self):
        findings, _ = HasDangerousWorkflowScriptInjection().run(RawResults())

        assert outcomes(findings) == [Outcome.NOT_APPLICABLE]

    def test_one_finding_per_injection(self):
        findings, _ = HasDangerousWorkflowScriptInjection().run(
            workflows(
                DangerousWorkflowType.SCRIPT_INJECTION,
                DangerousWorkflowType.UNTRUSTED_CHECKOUT,
                DangerousWorkflowType.SCRIPT_INJECTION,
            )
        )

        assert outcomes(findings) == [Outcome.TRUE, Outcome.TRUE]
        assert [f.values["job"] for f in findings] == ["job0", "job2"]

    def test_no_injection(self):
        findings, _ = HasDangerousWorkflowScriptInjection().run(
            workflows(DangerousWorkflowType.UNTRUSTED_CHECKOUT)
        )

        assert outcomes(findings) == [Outcome.FALSE]


class TestSecurityPolicyPresent:
    """Tests for the security policy probe."""

    def test_file_present_on_repo(self):
        """Test a text policy file in the repository."""
        findings, probe_id = SecurityPolicyPresent().run(policies(FileType.TEXT))

        assert probe_id == SecurityPolicyPresent.name
        assert outcomes(findings) == [Outcome.TRUE]
        assert findings[0].location.path == "SECURITY.md"
        assert findings[0].location.type == FileType.TEXT

    def test_file_present_on_org(self):
        """Test a policy linked from the organization."""
        findings, _ = SecurityPolicyPresent().run(policies(FileType.URL))

        assert outcomes(findings) == [Outcome.TRUE]

    def test_files_present_on_org_and_repo(self):
        """Test that every file yields a finding, in input order."""
        findings, _ = SecurityPolicyPresent().run(policies(FileType.URL, FileType.TEXT))

        assert outcomes(findings) == [Outcome.TRUE, Outcome.TRUE]
        assert [f.location.type for f in findings] == [FileType.URL, FileType.TEXT]

    def test_file_not_present(self):
        """Test that absence is one negative finding."""
        findings, _ = SecurityPolicyPresent().run(RawResults())

        assert outcomes(findings) == [Outcome.FALSE]

    def test_nil_raw(self):
        """Test the nil-input error."""
        with pytest.raises(NilInputError):
            SecurityPolicyPresent().run(None)


class TestHasLicenseFile:
    """Tests for the license file probe."""

    def test_license_present(self):
        raw = RawResults(license_results=LicenseData(license_files=[
            LicenseFile(file=File(path="LICENSE", type=FileType.TEXT), spdx_id="Apache-2.0"),
        ]))

        findings, _ = HasLicenseFile().run(raw)

        assert outcomes(findings) == [Outcome.TRUE]
        assert findings[0].values == {"spdxID": "Apache-2.0"}

    def test_license_missing(self):
        findings, _ = HasLicenseFile().run(RawResults())

        assert outcomes(findings) == [Outcome.FALSE]


class TestHasBinaryArtifacts:
    """Tests for the binary artifacts probe."""

    def test_artifacts_in_order(self):
        raw = RawResults(binary_artifact_results=BinaryArtifactData(files=[
            File(path="bin/tool.exe", type=FileType.BINARY),
            File(path="lib/helper.jar", type=FileType.BINARY),
        ]))

        findings, _ = HasBinaryArtifacts().run(raw)

        assert outcomes(findings) == [Outcome.TRUE, Outcome.TRUE]
        assert [f.location.path for f in findings] == ["bin/tool.exe", "lib/helper.jar"]

    def test_no_artifacts(self):
        findings, _ = HasBinaryArtifacts().run(RawResults())

        assert outcomes(findings) == [Outcome.FALSE]


class TestRawResults:
    """Tests for the raw facts snapshot."""

    def test_snapshot_is_frozen(self):
        """Test that probes cannot mutate shared facts."""
        raw = policies(FileType.TEXT)

        with pytest.raises(ValidationError):
            raw.security_policy_results = SecurityPolicyData()
        assert isinstance(raw.security_policy_results.policy_files, tuple)

    def test_topics_name_raw_fields(self):
        """Test that every probe declares real RawResults fields."""
        for probe_class in ALL_PROBES.values():
            assert probe_class.topics
            for topic in probe_class.topics:
                assert topic in RawResults.model_fields


class TestProbeRunner:
    """Tests for ProbeRunner."""

    def test_runs_all_probes_in_registry_order(self):
        raw = policies(FileType.TEXT, FileType.URL)

        findings = ProbeRunner(settings=Settings()).run(raw)

        probe_order = list(dict.fromkeys(f.probe for f in findings))
        assert probe_order == list(ALL_PROBES)
        policy = [f for f in findings if f.probe == SecurityPolicyPresent.name]
        assert outcomes(policy) == [Outcome.TRUE, Outcome.TRUE]

    def test_nil_raw(self):
        with pytest.raises(NilInputError):
            ProbeRunner(settings=Settings()).run(None)

    def test_concurrent_runs_share_snapshot(self):
        """Test that probes run concurrently over one snapshot without changing it."""
        raw = workflows(DangerousWorkflowType.UNTRUSTED_CHECKOUT)
        before = raw.model_dump()
        barrier = threading.Barrier(2, timeout=5)

        class Waiting(BaseProbe):
            topics = ("dangerous_workflow_results",)

            def __init__(self, name):
                self.name = name

            def evaluate(self, raw):
                barrier.wait()
                return [self.finding(Outcome.TRUE, "waited")]

        runner = ProbeRunner([Waiting("first"), Waiting("second")], settings=Settings())

        findings = runner.run(raw)

        assert [f.probe for f in findings] == ["first", "second"]
        assert raw.model_dump() == before

    def test_mismatched_id(self):
        class Liar(BaseProbe):
            name = "liar"

            def run(self, raw):
                return [], "someone-else"

            def evaluate(self, raw):
                return []

        with pytest.raises(PostureError):
            ProbeRunner([Liar()], settings=Settings()).run(RawResults())

    def test_probe_error_propagates(self):
        class Broken(BaseProbe):
            name = "broken"

            def evaluate(self, raw):
                raise RuntimeError("bad data")

        with pytest.raises(RuntimeError):
            ProbeRunner([Broken()], settings=Settings()).run(RawResults())
