"""
Probes - Runner

Runs a set of probes concurrently over one RawResults snapshot.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from posture.config import get_settings
from posture.errors import NilInputError, PostureError
from posture.probes.base import BaseProbe
from posture.probes.registry import ALL_PROBES
from posture.schemas.finding import Finding
from posture.schemas.raw import RawResults

logger = logging.getLogger(__name__)


class ProbeRunner:
    """Evaluates probes in parallel and collects their findings in registry order."""

    def __init__(self, probes: Optional[Iterable[BaseProbe]] = None, settings=None):
        self.settings = settings or get_settings()
        if probes is None:
            probes = [probe_class() for probe_class in ALL_PROBES.values()]
        self.probes: List[BaseProbe] = list(probes)

    def run(self, raw: Optional[RawResults]) -> List[Finding]:
        """
        Run every probe against the same snapshot.

        Args:
            raw: Collected facts; shared read-only by all probes

        Returns:
            Findings of all probes, grouped per probe in the runner's order

        Raises:
            NilInputError: raw is None
            PostureError: a probe reported an id other than its registered one
        """
        if raw is None:
            raise NilInputError()
        if not self.probes:
            return []

        workers = min(len(self.probes), self.settings.probe.max_workers)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(probe.run, raw) for probe in self.probes]

            findings: List[Finding] = []
            for probe, future in zip(self.probes, futures):
                probe_findings, probe_id = future.result()
                if probe_id != probe.name:
                    raise PostureError(
                        f"probe {probe.name!r} reported id {probe_id!r}"
                    )
                logger.debug(f"Probe {probe_id} produced {len(probe_findings)} finding(s)")
                findings.extend(probe_findings)

        logger.info(f"Ran {len(self.probes)} probes: {len(findings)} findings")
        return findings
