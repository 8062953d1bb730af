"""
Probes - Base Probe

Abstract base class for probes.

A probe reads one topic of a RawResults snapshot and turns it into ordered
findings. Probes never collect data, never perform I/O and never mutate the
snapshot, so any number of them can share one RawResults concurrently.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from posture.errors import NilInputError
from posture.schemas.finding import Finding, Location, Outcome
from posture.schemas.raw import RawResults


class BaseProbe(ABC):
    """
    Base class for probe implementations.

    To add a probe:
        1. Subclass BaseProbe
        2. Set `name` to the stable probe id
        3. Set `topics` to the RawResults fields the probe reads
        4. Implement `evaluate(raw) -> List[Finding]`
        5. Register the class in posture.probes.ALL_PROBES
    """

    name: str = ""
    topics: Tuple[str, ...] = ()

    def run(self, raw: Optional[RawResults]) -> Tuple[List[Finding], str]:
        """
        Evaluate the probe.

        DO NOT OVERRIDE THIS METHOD. Override `evaluate()` instead.

        Args:
            raw: Collected facts for one repository

        Returns:
            (findings in raw item order, probe id)

        Raises:
            NilInputError: raw is None
        """
        if raw is None:
            raise NilInputError(f"{self.name}: nil raw results")
        return self.evaluate(raw), self.name

    @abstractmethod
    def evaluate(self, raw: RawResults) -> List[Finding]:
        """Produce findings from the probe's topic subtree."""
        pass

    def finding(
        self,
        outcome: Outcome,
        message: str,
        location: Optional[Location] = None,
        **values: str,
    ) -> Finding:
        """Build a finding tagged with this probe's id."""
        return Finding(
            probe=self.name,
            outcome=outcome,
            message=message,
            location=location,
            values=values,
        )

    def __repr__(self) -> str:
        return f"<Probe {self.name!r}>"
