from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from common.a11y_engine.models import Check, Domain, RuleResult

logger = logging.getLogger(__name__)


class _RecordStorage(ABC):
    """Options and results on top of four record primitives.

    Options of a check that has a domain live on the domain record, so
    answers given for one page of a site are reused for its other pages.
    """

    @abstractmethod
    def _load_check(self, check_id: str) -> Optional[Check]:
        ...

    @abstractmethod
    def _save_check(self, check: Check) -> None:
        ...

    @abstractmethod
    def _load_domain(self, name: str) -> Optional[Domain]:
        ...

    @abstractmethod
    def _save_domain(self, domain: Domain) -> None:
        ...

    def create_check(self, check: Check) -> bool:
        if self._load_check(check.id) is not None:
            return False
        self._save_check(check)
        return True

    def get_check(self, check_id: str) -> Optional[Check]:
        return self._load_check(check_id)

    def create_domain(self, domain: Domain) -> bool:
        if self._load_domain(domain.name) is not None:
            return False
        self._save_domain(domain)
        return True

    def get_domain(self, name: str) -> Optional[Domain]:
        return self._load_domain(name)

    def get_options(self, check_id: str) -> Dict[str, Any]:
        check = self._load_check(check_id)
        if check is None:
            return {}
        if check.domain:
            domain = self._load_domain(check.domain)
            return dict(domain.options) if domain is not None else {}
        return dict(check.options)

    def get_option(self, check_id: str, key: str) -> Any:
        return self.get_options(check_id).get(key)

    def set_option(self, check_id: str, key: str, value: Any) -> bool:
        check = self._load_check(check_id)
        if check is None:
            return False
        if check.domain:
            domain = self._load_domain(check.domain)
            if domain is None:
                logger.warning("check %s refers to missing domain %s", check_id, check.domain)
                return False
            domain.options[key] = value
            self._save_domain(domain)
            return True
        check.options[key] = value
        self._save_check(check)
        return True

    def append_result(self, check_id: str, result: RuleResult) -> bool:
        check = self._load_check(check_id)
        if check is None:
            return False
        check.results.append(result)
        self._save_check(check)
        return True

    def replace_result(self, check_id: str, old: RuleResult, new: RuleResult) -> bool:
        check = self._load_check(check_id)
        if check is None:
            return False
        for idx, existing in enumerate(check.results):
            if existing.test_slug == old.test_slug:
                check.results[idx] = new
                self._save_check(check)
                return True
        return False

    def list_results(self, check_id: str) -> List[RuleResult]:
        check = self._load_check(check_id)
        return list(check.results) if check is not None else []


class InMemoryStorage(_RecordStorage):
    def __init__(self) -> None:
        self._checks: Dict[str, Check] = {}
        self._domains: Dict[str, Domain] = {}

    def _load_check(self, check_id: str) -> Optional[Check]:
        check = self._checks.get(check_id)
        return check.model_copy(deep=True) if check is not None else None

    def _save_check(self, check: Check) -> None:
        self._checks[check.id] = check.model_copy(deep=True)

    def _load_domain(self, name: str) -> Optional[Domain]:
        domain = self._domains.get(name)
        return domain.model_copy(deep=True) if domain is not None else None

    def _save_domain(self, domain: Domain) -> None:
        self._domains[domain.name] = domain.model_copy(deep=True)

    def delete_check(self, check_id: str) -> bool:
        return self._checks.pop(check_id, None) is not None

    def delete_domain(self, name: str) -> bool:
        return self._domains.pop(name, None) is not None


@dataclass(frozen=True)
class JsonFileStorage(_RecordStorage):
    """One JSON file per check and per domain below ``root_dir``."""

    root_dir: Path

    def _path(self, kind: str, name: str) -> Path:
        # Percent-encoding keeps distinct ids in distinct files.
        return self.root_dir / kind / f"{quote(name, safe='')}.json"

    def _read(self, path: Path) -> Optional[Dict[str, Any]]:
        if not path.exists():
            return None
        return json.loads(path.read_text())

    def _write(self, path: Path, payload: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload)

    def _load_check(self, check_id: str) -> Optional[Check]:
        raw = self._read(self._path("checks", check_id))
        return Check.model_validate(raw) if raw is not None else None

    def _save_check(self, check: Check) -> None:
        self._write(self._path("checks", check.id), check.model_dump_json(indent=2))

    def _load_domain(self, name: str) -> Optional[Domain]:
        raw = self._read(self._path("domains", name))
        return Domain.model_validate(raw) if raw is not None else None

    def _save_domain(self, domain: Domain) -> None:
        self._write(self._path("domains", domain.name), domain.model_dump_json(indent=2))

    def delete_check(self, check_id: str) -> bool:
        path = self._path("checks", check_id)
        if not path.exists():
            return False
        path.unlink()
        return True

    def delete_domain(self, name: str) -> bool:
        path = self._path("domains", name)
        if not path.exists():
            return False
        path.unlink()
        return True
