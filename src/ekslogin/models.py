from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileInfo:
    """An AWS CLI profile and the region configured for it."""

    name: str
    region: str

    def __str__(self) -> str:
        return f"{self.name} (region: {self.region})"
