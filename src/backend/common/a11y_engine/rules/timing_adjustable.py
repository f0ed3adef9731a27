from __future__ import annotations

import re

from ..config import TimingAdjustableRuleConfig
from ..context import RuleContext
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

_DELAY_RE = re.compile(r"^\s*(\d+)")


def refresh_delay(content) -> int:
    """Leading integer of a refresh ``content`` value ("5; url=/next" -> 5)."""
    match = _DELAY_RE.match(content or "")
    return int(match.group(1)) if match else 0


@register_rule
class TimingAdjustable(Rule):
    slug = "timing_adjustable"
    title = "Timing Adjustable"
    description = (
        "Contents must be shown without time limit, or at least there have to be controls to disable it or "
        "increase the duration. Links should be opened without delay."
    )
    guideline_title = "2.2.1 Timing Adjustable"
    guideline_anchor = "time-limits-required-behaviors"
    config_model = TimingAdjustableRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        cfg = self.get_config(ctx)
        for meta in ctx.dom.find("meta[http-equiv]"):
            if (meta.get_attribute("http-equiv") or "").strip().lower() != "refresh":
                continue
            if refresh_delay(meta.get_attribute("content")) > cfg.max_refresh_seconds:
                outcome.error(
                    'A meta tag with an invalid value for http-equiv="refresh" was found.',
                    "invalid_meta_refresh",
                    meta,
                )

        outcome.finish("No problems were found in the HTML code.")
