"""
In-memory repository adapters.

Process-local implementations of FederationCache and UserKeyDirectory
for development and tests. Entries live for the process lifetime.
"""

from collections import defaultdict

from src.domain.models import FederationRecord


class InMemoryFederationCache:
    """
    Implements FederationCache protocol with a dict of lists.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._records: defaultdict[str, list[FederationRecord]] = defaultdict(list)

    async def get(self, domain: str) -> list[FederationRecord]:
        return list(self._records.get(domain, []))

    async def set(self, domain: str, record: FederationRecord) -> None:
        self._records[domain].append(record)


class InMemoryUserKeyDirectory:
    """Implements UserKeyDirectory protocol with a dict of lists."""

    def __init__(self, keys: dict[str, list[str]] | None = None) -> None:
        self._keys = {email.lower(): list(values) for email, values in (keys or {}).items()}

    def add(self, email: str, public_key: str) -> None:
        self._keys.setdefault(email.lower(), []).append(public_key)

    async def get_public_keys(self, email: str) -> list[str]:
        return list(self._keys.get(email.strip().lower(), []))
