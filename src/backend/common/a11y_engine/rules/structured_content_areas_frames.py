from __future__ import annotations

import re

from ..config import StructuredContentAreasFramesRuleConfig
from ..context import RuleContext
from ..helpers import linkify_src, sanitize_src
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

FRAME_TYPE_OPTIONS = (("content", "Content frame"), ("decorative", "Layout frame"))


@register_rule
class StructuredContentAreasFrames(Rule):
    slug = "structured_content_areas_frames"
    title = "Structured Content Areas: Frames"
    description = "Frames must have descriptive title attributes."
    guideline_title = "2.4.1 Bypass Blocks"
    guideline_anchor = "navigation-mechanisms-skip"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H64",
            title="Using the title attribute of the frame and iframe elements",
        ),
    )
    may_request_data = True
    config_model = StructuredContentAreasFramesRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        frames = ctx.dom.find("frame,iframe")
        if not frames:
            outcome.skip("There are no frames in the HTML code provided. Therefore this test was skipped.")
            return

        cfg = self.get_config(ctx)
        position_re = None
        if cfg.position_words:
            words = "|".join(re.escape(word) for word in cfg.position_words)
            position_re = re.compile(rf"\b(?:{words})\b", re.IGNORECASE)

        for frame in frames:
            title = frame.get_attribute("title")
            src = frame.get_attribute("src") or ""

            if title is None:
                outcome.error("The following frame is missing a title attribute.", "missing_title_attribute", frame)
            elif not title.strip():
                key = "frame_type_" + sanitize_src(src)
                frame_type = self.get_option(ctx, key)
                if not frame_type:
                    outcome.ask(
                        key,
                        "Frame Type",
                        description=(
                            f"Choose whether the frame {linkify_src(src, ctx.url)} is purely a layout frame or "
                            "actually provides content."
                        ),
                        options=FRAME_TYPE_OPTIONS,
                        default="content",
                    )
                elif frame_type == "content":
                    outcome.error(
                        "The following frame has an empty title attribute although it provides actual content. "
                        "An empty title attribute is only acceptable for layout frames.",
                        "empty_title_attribute_content",
                        frame,
                    )
            elif src and title in src:
                outcome.error(
                    "The following frame seems to have an auto-generated title attribute. "
                    "The title should describe the frame in clear human language.",
                    "title_attribute_part_of_src",
                    frame,
                )
            elif position_re is not None and position_re.search(title):
                outcome.error(
                    "The following frame uses the title attribute to describe the position of the frame.",
                    "title_attribute_contains_position",
                    frame,
                )

        outcome.finish("All frames in the HTML code have valid title attributes provided.")
