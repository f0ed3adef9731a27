from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Type

from .errors import RuleNotFoundError
from .rule import Rule


class RuleRegistry:
    def __init__(self):
        self._rules: Dict[str, Type[Rule]] = {}

    def register(self, rule_cls: Type[Rule]) -> None:
        slug = getattr(rule_cls, "slug", None)
        if not slug:
            raise ValueError("Rule class missing slug")
        if slug in self._rules:
            raise ValueError(f"Duplicate rule slug registered: {slug}")
        self._rules[slug] = rule_cls

    def create_all(self, order: Sequence[str] = ()) -> List[Rule]:
        """Instantiate every rule, ``order`` first, then the rest by registration."""
        slugs = [s for s in order if s in self._rules]
        slugs += [s for s in self._rules if s not in slugs]
        return [self._rules[s]() for s in slugs]

    def get(self, slug: str) -> Type[Rule]:
        try:
            return self._rules[slug]
        except KeyError:
            raise RuleNotFoundError(f"Unknown test: {slug}") from None

    def slugs(self) -> Iterable[str]:
        return self._rules.keys()


registry = RuleRegistry()


def register_rule(rule_cls: Type[Rule]) -> Type[Rule]:
    registry.register(rule_cls)
    return rule_cls
