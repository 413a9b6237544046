"""
EKS Login Run Configuration.

Holds the values resolved for a single run. The CLI fills it from flags and
environment variables, and the pipeline steps fill in whatever was left empty.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_REGION = "us-west-2"
REQUIRED_TOOLS = ("aws", "kubectl")


@dataclass
class RunConfig:
    """Mutable state for one eks-login run."""

    profile: Optional[str] = None
    region: Optional[str] = None
    cluster: Optional[str] = None
    skip_sso: bool = False
    interactive: bool = True

    @property
    def effective_region(self) -> str:
        return self.region or DEFAULT_REGION
