"""
Federation value objects.

FederationRecord and SrvTarget are immutable once created. The dict
helpers translate to and from the persisted cache shape:

    {domain, created, publickey, srv: [{name, port, priority, weight}]}
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SrvTarget:
    """One DNS SRV answer (standard SRV semantics)."""

    name: str
    port: int
    priority: int
    weight: int

    @property
    def address(self) -> str:
        """Host and port in ``name:port`` form."""
        return f"{self.name}:{self.port}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "port": self.port,
            "priority": self.priority,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SrvTarget":
        return cls(
            name=data["name"],
            port=int(data["port"]),
            priority=int(data["priority"]),
            weight=int(data["weight"]),
        )


@dataclass(frozen=True)
class FederationRecord:
    """
    A discovered federation peer for a domain.

    Created only by the response parser. ``created`` is the discovery
    time as string-encoded epoch milliseconds.
    """

    domain: str
    created: str
    public_key: str
    srv: tuple[SrvTarget, ...] = field(default_factory=tuple)

    @property
    def is_usable(self) -> bool:
        """A record can be handed to the handshake only with a key and a target."""
        return bool(self.public_key) and len(self.srv) > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "created": self.created,
            "publickey": self.public_key,
            "srv": [target.to_dict() for target in self.srv],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FederationRecord":
        return cls(
            domain=data["domain"],
            created=str(data["created"]),
            public_key=data.get("publickey") or "",
            srv=tuple(SrvTarget.from_dict(item) for item in data.get("srv") or []),
        )


@dataclass(frozen=True)
class EncryptedEnvelope:
    """Sealed request body plus the checksum computed over it."""

    payload: dict[str, str]
    checksum: str
