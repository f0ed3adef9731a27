from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from .config import RulesConfig
from .models import ValidatorIssue
from .parser import Dom
from .storage import Storage


class Validator(Protocol):
    def validate(self, html: str) -> List[ValidatorIssue]:
        """Return the issues reported for ``html``; raise on transport failure."""
        ...


class OptionsView(Protocol):
    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> bool:
        ...

    def all(self) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class StoredOptions:
    """Options of one check, read and written through storage."""

    storage: Storage
    check_id: str

    def get(self, key: str, default: Any = None) -> Any:
        value = self.storage.get_option(self.check_id, key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> bool:
        return self.storage.set_option(self.check_id, key, value)

    def all(self) -> Dict[str, Any]:
        return dict(self.storage.get_options(self.check_id))


@dataclass(frozen=True)
class DictOptions:
    """In-process options, for evaluating a document without a stored check."""

    values: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        value = self.values.get(key)
        return default if value is None else value

    def set(self, key: str, value: Any) -> bool:
        self.values[key] = value
        return True

    def all(self) -> Dict[str, Any]:
        return dict(self.values)


@dataclass(frozen=True)
class RuleContext:
    check_id: str
    dom: Dom
    options: OptionsView = field(default_factory=DictOptions)
    url: Optional[str] = None
    rules_config: RulesConfig = field(default_factory=RulesConfig)
    validator: Optional[Validator] = None
