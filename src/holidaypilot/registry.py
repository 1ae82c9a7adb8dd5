"""
HolidayPilot Provider Registry

Maps jurisdiction identifiers to providers.

Registration validates the static composition once, so evaluation never has
to: parents must already be registered, chains must be acyclic, and the
provider's timezone must exist.

Usage:
    registry = default_registry()
    provider = registry.lookup("Germany/Thuringia")   # or "DE-TH"
    holidays = registry.holidays("CH-GL", 2024)
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Iterator, Optional

from .calendars import resolve_timezone
from .engine import compute_holidays
from .exceptions import ProviderConflictError, UnknownProviderError
from .models import HolidayCollection
from .providers import BUILTIN_PROVIDERS, Provider


logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Registry of jurisdiction providers, addressable by code or name.

    Lookups are case-insensitive; "Switzerland/Glarus" and "ch-gl" resolve
    to the same provider.
    """

    def __init__(self, providers: Iterable[Provider] = ()):
        self._providers: dict[str, Provider] = {}
        self._aliases: dict[str, str] = {}
        for provider in providers:
            self.register(provider)

    def register(self, provider: Provider) -> Provider:
        """
        Register a provider.

        Raises:
            ProviderConflictError: If the code or name is already taken
            ProviderCycleError: If the parent chain is cyclic
            UnknownProviderError: If the parent is not registered
            UnknownTimezoneError: If the timezone does not exist
        """
        code_alias = provider.code.lower()
        name_alias = provider.name.lower()
        for alias in (code_alias, name_alias):
            if alias in self._aliases:
                raise ProviderConflictError(
                    message=f"Jurisdiction identifier '{alias}' is already registered",
                    details={"identifier": alias, "existing": self._aliases[alias]},
                    jurisdiction=provider.code,
                )

        self._validate_chain(provider)
        resolve_timezone(provider.timezone)

        self._providers[provider.code] = provider
        self._aliases[code_alias] = provider.code
        self._aliases[name_alias] = provider.code
        logger.debug("Registered provider %s (%s)", provider.code, provider.name)
        return provider

    def _validate_chain(self, provider: Provider) -> None:
        """
        Ensure every ancestor is the registered provider of its code.

        Raises:
            ProviderCycleError: If the chain revisits a jurisdiction
        """
        for ancestor in provider.ancestors():
            registered = self._providers.get(ancestor.code)
            if registered is None:
                raise UnknownProviderError(
                    message=f"Parent jurisdiction '{ancestor.code}' is not registered",
                    details={"parent": ancestor.code},
                    jurisdiction=provider.code,
                )
            if registered is not ancestor:
                raise ProviderConflictError(
                    message=f"Parent '{ancestor.code}' differs from the registered provider",
                    details={"parent": ancestor.code},
                    jurisdiction=provider.code,
                )

    def lookup(self, identifier: str) -> Provider:
        """
        Find a provider by code or name.

        Raises:
            UnknownProviderError: If nothing is registered under the identifier
        """
        code = self._aliases.get(identifier.lower())
        if code is None:
            raise UnknownProviderError(
                message=f"Unknown jurisdiction '{identifier}'",
                details={"identifier": identifier, "available": self.codes()},
            )
        return self._providers[code]

    def get(self, identifier: str) -> Optional[Provider]:
        code = self._aliases.get(identifier.lower())
        return self._providers.get(code) if code else None

    def codes(self) -> list[str]:
        return sorted(self._providers)

    def subdivisions(self, identifier: str) -> list[Provider]:
        """Direct subdivisions of a jurisdiction."""
        parent = self.lookup(identifier)
        return [
            p for p in self._providers.values()
            if p.parent is not None and p.parent.code == parent.code
        ]

    def holidays(self, identifier: str, year: int, locale: Optional[str] = None) -> HolidayCollection:
        """Look up a jurisdiction and compute its holidays for a year."""
        return compute_holidays(self.lookup(identifier), year, locale)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier.lower() in self._aliases

    def __iter__(self) -> Iterator[Provider]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)


@lru_cache(maxsize=1)
def default_registry() -> ProviderRegistry:
    """Registry of the built-in jurisdictions."""
    return ProviderRegistry(BUILTIN_PROVIDERS)
