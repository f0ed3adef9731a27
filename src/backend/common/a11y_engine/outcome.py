from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .models import RequestData, RequestOption, ResultMessage, ResultType
from .parser import Node, TextNode


class RuleOutcome:
    """Mutable skeleton a rule fills in during one evaluation.

    Starts as ``error`` with nothing in it. Rules record findings through
    `error` / `warning`, ask questions through `ask`, and settle the verdict
    with `finish` or `skip`.
    """

    def __init__(self) -> None:
        self.type = ResultType.ERROR
        self.messages: List[ResultMessage] = []
        self.message_codes: List[str] = []
        self.request_data: List[RequestData] = []
        self.has_errors = False
        self.has_warnings = False

    def _add(
        self,
        message: str,
        code: Optional[str],
        node: Optional[Union[Node, TextNode]],
        snippet: Optional[str],
        line: Optional[int] = None,
    ) -> None:
        if node is not None:
            line = line or node.get_line_no() or None
            if snippet is None:
                snippet = node.outer_html()
        self.messages.append(ResultMessage(message=message, line=line, code=snippet))
        if code:
            self.message_codes.append(code)

    def error(
        self,
        message: str,
        code: Optional[str] = None,
        node: Optional[Union[Node, TextNode]] = None,
        *,
        snippet: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        self._add(message, code, node, snippet, line)
        self.has_errors = True

    def warning(
        self,
        message: str,
        code: Optional[str] = None,
        node: Optional[Union[Node, TextNode]] = None,
        *,
        snippet: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        self._add(message, code, node, snippet, line)
        self.has_warnings = True

    def ask(
        self,
        slug: str,
        label: str,
        *,
        description: str = "",
        options: Iterable[Tuple[str, str]] = (),
        default: str = "",
        type: str = "select",
    ) -> None:
        # One question per slug, even when several nodes share it.
        if any(req.slug == slug for req in self.request_data):
            return
        self.request_data.append(
            RequestData(
                slug=slug,
                type=type,
                label=label,
                description=description,
                options=[RequestOption(value=value, label=text) for value, text in options],
                default=default,
            )
        )

    def skip(self, message: str) -> None:
        self.type = ResultType.SKIPPED
        self.messages = [ResultMessage(message=message)]
        self.message_codes = ["skipped"]

    def finish(self, success_message: str) -> None:
        if self.has_errors:
            self.type = ResultType.ERROR
        elif self.has_warnings:
            self.type = ResultType.WARNING
        else:
            self.type = ResultType.SUCCESS
            self.messages = [ResultMessage(message=success_message)]
            self.message_codes = ["success"]


YES_NO: Sequence[Tuple[str, str]] = (("yes", "Yes"), ("no", "No"))
