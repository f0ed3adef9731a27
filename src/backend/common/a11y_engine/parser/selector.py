from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Pattern, Tuple

# Identifier pattern used for tags, ids, classes and attribute names.
_IDENT = r"[_\w-]+[_\w\d-]*"

# Literal values (attribute values, :contains() arguments) are swapped for
# private-use placeholders before any substitution runs, so `.`, `#`, `,` or
# whitespace inside a value can never be mistaken for selector syntax.
_PH_OPEN = "\ue000"
_PH_CLOSE = "\ue001"
_PH = f"{_PH_OPEN}\\d+{_PH_CLOSE}"
_PH_RE = re.compile(f"{_PH_OPEN}(\\d+){_PH_CLOSE}")

_ATTR_VALUE_RE = re.compile(r"""=\s*(?:"([^"]*)"|'([^']*)'|([^\]\s"']*))\s*\]""")
_CONTAINS_RE = re.compile(r""":contains\(\s*(?:"([^"]*)"|'([^']*)'|([^)]*?))\s*\)""")

_COMBINATOR_RE = re.compile(r"\s*([>~+])\s*")
_DESCENDANT_SPLIT_RE = re.compile(r"\s+(?![^\[]+\])")
_SCOPE_RE = re.compile(r"descendant-or-self:::scope")

_INPUT_TYPES = (
    "datetime-local|datetime|text|password|checkbox|radio|button|submit|reset|file|hidden|image"
    "|date|month|time|week|number|range|email|url|search|tel|color"
)

# Applied in order to every descendant-separated part of a selector branch.
_PART_SUBSTITUTIONS: List[Tuple[Pattern[str], str]] = [
    # input:checked, :disabled, ...
    (re.compile(r"(.+)?:(checked|disabled|required|autofocus)(?![\w-])"), r"\1[@\2]"),
    # input:autocomplete, :autocomplete
    (re.compile(r"(.+)?:autocomplete(?![\w-])"), r'\1[@autocomplete="on"]'),
    # :checkbox, input:radio, ...
    (re.compile(rf"(?:input)?:({_INPUT_TYPES})(?![\w-])"), r'input[@type="\1"]'),
    # foo[attr]
    (re.compile(rf"(\w+)\[({_IDENT})\]"), r"\1[@\2]"),
    # [attr]
    (re.compile(rf"\[({_IDENT})\]"), r"*[@\1]"),
    # [attr=value]
    (re.compile(rf"\[({_IDENT})\s*=\s*({_PH})\]"), r"[@\1=\2]"),
    # div#foo
    (re.compile(rf"({_IDENT})#({_IDENT})"), r'\1[@id="\2"]'),
    # #foo
    (re.compile(rf"#({_IDENT})"), r'*[@id="\1"]'),
    # div.foo
    (re.compile(rf"({_IDENT})\.({_IDENT})"), r'\1[contains(concat(" ",@class," ")," \2 ")]'),
    # .foo
    (re.compile(rf"\.({_IDENT})"), r'*[contains(concat(" ",@class," ")," \1 ")]'),
    # div:first-child, div:last-child
    (re.compile(rf"({_IDENT}):first-child"), r"*/\1[position()=1]"),
    (re.compile(rf"({_IDENT}):last-child"), r"*/\1[position()=last()]"),
    (re.compile(r":first-child"), r"*/*[position()=1]"),
    (re.compile(r":last-child"), r"*/*[position()=last()]"),
    (re.compile(r":nth-last-child\((\d+)\)"), r"[position()=(last() - (\1 - 1))]"),
    (re.compile(rf"({_IDENT}):nth-child\((\d+)\)"), r"*/*[position()=\2 and self::\1]"),
    (re.compile(r":nth-child\((\d+)\)"), r"*/*[position()=\1]"),
    # a > li:first-child selects children, not grandchildren.
    (re.compile(r"([>~])\*/"), r"\1"),
    # div:contains(foo), :contains(foo)
    (re.compile(rf"({_IDENT}):contains\(({_PH})\)"), r"\1[contains(string(.),\2)]"),
    (re.compile(rf":contains\(({_PH})\)"), r"*[contains(string(.),\1)]"),
    # Predicates that lost their node test.
    (re.compile(r"(^|[>~+])\["), r"\1*["),
    # Compound selectors that produced `]*[` or `]*/*[` while chaining.
    (re.compile(r"\]\*/\*\["), "]["),
    (re.compile(r"\]\*\["), "]["),
    # Combinators.
    (re.compile(r">"), "/"),
    (re.compile(r"~"), "/following-sibling::"),
    (re.compile(rf"\+({_IDENT})"), r"/following-sibling::*[1][self::\1]"),
    (re.compile(r"\+\*"), "/following-sibling::*[1]"),
]


def xpath_literal(value: str) -> str:
    """Quote ``value`` as an XPath 1.0 string literal."""
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    pieces = value.split('"')
    return "concat(" + ", '\"', ".join(f'"{piece}"' for piece in pieces) + ")"


def _protect_literals(selector: str) -> Tuple[str, List[str]]:
    literals: List[str] = []

    def _stash(match: re.Match, prefix: str, suffix: str) -> str:
        value = next((g for g in match.groups() if g is not None), "")
        literals.append(value)
        return f"{prefix}{_PH_OPEN}{len(literals) - 1}{_PH_CLOSE}{suffix}"

    selector = _ATTR_VALUE_RE.sub(lambda m: _stash(m, "=", "]"), selector)
    selector = _CONTAINS_RE.sub(lambda m: _stash(m, ":contains(", ")"), selector)
    return selector, literals


def _restore_literals(xpath: str, literals: List[str]) -> str:
    return _PH_RE.sub(lambda m: xpath_literal(literals[int(m.group(1))]), xpath)


def _split_step(path: str) -> Tuple[str, str]:
    """Split ``path`` at its first top-level ``/`` (outside predicates and strings)."""
    depth = 0
    quote = ""
    for idx, ch in enumerate(path):
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        elif ch == "/" and depth == 0:
            return path[:idx], path[idx:]
    return path, ""


def _apply_subject(xpath: str) -> str:
    # `div $p a` selects the `p` elements that contain an `a`.
    head, sep, tail = xpath.partition("$")
    if not sep:
        return xpath
    step, rest = _split_step(tail.replace("$", ""))
    if not rest:
        return head + step
    return f"{head}{step}[{rest.lstrip('/')}]"


def _translate_branch(branch: str) -> str:
    branch = _COMBINATOR_RE.sub(r"\1", branch.strip())
    parts = _DESCENDANT_SPLIT_RE.split(branch)
    translated = []
    for part in parts:
        for pattern, replacement in _PART_SUBSTITUTIONS:
            part = pattern.sub(replacement, part)
        translated.append(part)

    xpath = "descendant-or-self::" + "/descendant::".join(translated)
    xpath = _SCOPE_RE.sub(".", xpath)
    return _apply_subject(xpath)


@lru_cache(maxsize=512)
def css_to_xpath(selector: str) -> str:
    """Translate a CSS selector into an XPath expression relative to the context node.

    Supported: tag, ``*``, ``#id``, ``.class``, ``[attr]``, ``[attr=value]``, the
    descendant, ``>``, ``~`` and ``+`` combinators, comma alternation,
    ``:first-child``, ``:last-child``, ``:nth-child(n)``, ``:nth-last-child(n)``,
    ``:contains(text)``, the state pseudo-classes (``:checked``, ``:disabled``,
    ``:required``, ``:autofocus``, ``:autocomplete``), input type shorthands
    (``:checkbox``, ``:text``, ...), ``:scope`` and ``$`` subject marking.

    The context node itself is part of the searched set (``descendant-or-self``).
    """
    protected, literals = _protect_literals(selector)
    branches = [b for b in protected.split(",") if b.strip()]
    if not branches:
        raise ValueError(f"Empty selector: {selector!r}")
    xpath = " | ".join(_translate_branch(b) for b in branches)
    return _restore_literals(xpath, literals)
