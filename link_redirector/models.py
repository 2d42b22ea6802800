"""Data models for the link redirector."""

import json
from dataclasses import dataclass

from .errors import CorruptRecordError


@dataclass(frozen=True)
class LinkRecord:
    """Value stored under a link identifier."""

    destination: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"destination": self.destination}

    def to_json(self) -> str:
        """Serialize for the key-value store."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict) -> "LinkRecord":
        """Create from dictionary."""
        return cls(destination=data["destination"])

    @classmethod
    def from_json(cls, value: str) -> "LinkRecord":
        """Parse a stored value.

        Raises:
            CorruptRecordError: If the value is not a JSON object with a
                string destination
        """
        try:
            data = json.loads(value)
        except (TypeError, ValueError) as e:
            raise CorruptRecordError(f"Stored value is not valid JSON: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("destination"), str):
            raise CorruptRecordError("Stored value has no string 'destination' field")

        return cls.from_dict(data)
