"""Screen-reader accessibility checks for static HTML documents.

This package contains only the evaluation engine:
- Rule inputs are a parsed document, stored answers and per-rule config.
- No HTTP fetching, validator transport or file storage lives here.
"""

from .config import RulesConfig
from .context import DictOptions, RuleContext, StoredOptions
from .errors import CheckError
from .models import Check, CheckCompleted, CheckReport, Domain, ResultType, RuleResult
from .parser import Dom, Node
from .runner import RulesRunner

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
