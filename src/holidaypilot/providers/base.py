"""
HolidayPilot Provider

A Provider is a jurisdiction's static, immutable rule set. Subdivisions hold
a reference to their parent provider and are evaluated parent-first; they add
rules, replace inherited ones (HolidayRule.replaces) or, rarely, remove them
(removed_keys).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from ..engine import compute_holidays
from ..exceptions import ProviderCycleError, UnknownTimezoneError
from ..models import HolidayCollection, HolidayRule
from ..translations import default_translations, merge_tables


@dataclass(frozen=True)
class Provider:
    """
    Holiday rule set of one jurisdiction.

    Attributes:
        code: Jurisdiction code (e.g., 'CH', 'CH-GL')
        name: Registry name (e.g., 'Switzerland/Glarus')
        rules: Local rules, evaluated in order
        timezone: IANA zone (None = inherit from parent)
        parent: Parent jurisdiction for subdivisions
        removed_keys: Inherited holiday keys suppressed by this jurisdiction
        default_locale: Locale used when the caller doesn't request one
        sources: Reference URLs for the rule set
        translations: Jurisdiction-specific names layered over the built-in catalog
    """
    code: str
    name: str
    rules: tuple[HolidayRule, ...] = ()
    timezone: Optional[str] = None
    parent: Optional[Provider] = field(default=None, repr=False)
    removed_keys: frozenset[str] = frozenset()
    default_locale: Optional[str] = None
    sources: tuple[str, ...] = ()
    translations: Mapping[str, Mapping[str, str]] = field(
        default_factory=dict, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "removed_keys", frozenset(self.removed_keys))
        object.__setattr__(self, "sources", tuple(self.sources))
        if self.parent is None:
            if self.timezone is None:
                raise UnknownTimezoneError(
                    message=f"Provider '{self.code}' needs a timezone",
                    jurisdiction=self.code,
                )
            if self.default_locale is None:
                object.__setattr__(self, "default_locale", "en")
        else:
            if self.timezone is None:
                object.__setattr__(self, "timezone", self.parent.timezone)
            if self.default_locale is None:
                object.__setattr__(self, "default_locale", self.parent.default_locale)

    @property
    def is_subdivision(self) -> bool:
        return self.parent is not None

    @property
    def rule_keys(self) -> list[str]:
        return [rule.key for rule in self.rules]

    def ancestors(self) -> list[Provider]:
        """
        Parent chain, nearest first.

        Raises:
            ProviderCycleError: If the chain revisits a jurisdiction
        """
        seen = {self.code}
        result = []
        current = self.parent
        while current is not None:
            if current.code in seen:
                raise ProviderCycleError(
                    message=f"Provider '{self.code}' has a cyclic parent chain",
                    details={"chain": [p.code for p in result] + [current.code]},
                    jurisdiction=self.code,
                )
            seen.add(current.code)
            result.append(current)
            current = current.parent
        return result

    def chain(self) -> list[Provider]:
        """Evaluation order: root jurisdiction first, this provider last."""
        return list(reversed(self.ancestors())) + [self]

    def translation_table(self) -> Mapping[str, Mapping[str, str]]:
        """Built-in catalog overlaid with each level's translations, root first."""
        return merge_tables(
            default_translations(),
            *(level.translations for level in self.chain()),
        )

    def holidays(self, year: int, locale: Optional[str] = None) -> HolidayCollection:
        """Compute this jurisdiction's holidays for a year."""
        return compute_holidays(self, year, locale)

    def subdivision(
        self,
        code: str,
        name: str,
        rules: Iterable[HolidayRule] = (),
        **kwargs,
    ) -> Provider:
        """Create a subdivision provider inheriting from this one."""
        return Provider(code=code, name=name, rules=tuple(rules), parent=self, **kwargs)
