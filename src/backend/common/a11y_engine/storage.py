from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from .models import Check, Domain, RuleResult


class Storage(Protocol):
    """Persistence boundary for checks, domains, options and results.

    Option reads and writes for a check created from a URL go to the domain
    record for its hostname; implementations resolve that delegation.
    """

    def create_check(self, check: Check) -> bool:
        ...

    def get_check(self, check_id: str) -> Optional[Check]:
        ...

    def delete_check(self, check_id: str) -> bool:
        ...

    def get_domain(self, name: str) -> Optional[Domain]:
        ...

    def create_domain(self, domain: Domain) -> bool:
        ...

    def delete_domain(self, name: str) -> bool:
        ...

    def get_options(self, check_id: str) -> Dict[str, Any]:
        ...

    def get_option(self, check_id: str, key: str) -> Any:
        ...

    def set_option(self, check_id: str, key: str, value: Any) -> bool:
        ...

    def append_result(self, check_id: str, result: RuleResult) -> bool:
        ...

    def replace_result(self, check_id: str, old: RuleResult, new: RuleResult) -> bool:
        ...

    def list_results(self, check_id: str) -> List[RuleResult]:
        ...
