from __future__ import annotations

from ..config import ImagesAlternativeTextsRuleConfig
from ..context import RuleContext
from ..helpers import is_captcha, linkify_src, sanitize_src
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule

IMAGE_TYPE_OPTIONS = (("content", "Part of content"), ("decorative", "Decorative"))


@register_rule
class ImagesAlternativeTexts(Rule):
    slug = "images_alternative_texts"
    title = "Alternative texts for images"
    description = (
        "Informative images must have alternative texts that serve the same purpose as the image itself. "
        "Images without an informative purpose, such as spacers or decorative images, should use an empty "
        "alt attribute."
    )
    guideline_title = "1.1.1 Non-text Content"
    guideline_anchor = "text-equiv-all"
    links = (
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H37", title="Using alt attributes on img elements"),
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/H67",
            title="Using null alt text and no title attribute on img elements for images that AT should ignore",
        ),
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H45", title="Using longdesc"),
    )
    may_request_data = True
    config_model = ImagesAlternativeTextsRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        cfg = self.get_config(ctx)
        denylist = {word.strip().lower() for word in cfg.non_descriptive_alt_texts}

        images = []
        for image in ctx.dom.find("img"):
            if is_captcha(image):
                continue
            parent = image.get_parent()
            if parent is not None and parent.get_tag_name() in ("object", "embed"):
                continue
            images.append(image)

        if not images:
            outcome.skip("There are no images in the HTML code provided. Therefore this test was skipped.")
            return

        for image in images:
            alt = image.get_attribute("alt")
            src = image.get_attribute("src") or ""

            if alt is None:
                outcome.error(
                    "The following image is missing an alt attribute.",
                    "missing_alt_attribute",
                    image,
                )
                continue

            if not alt.strip():
                key = "image_type_" + sanitize_src(src)
                image_type = self.get_option(ctx, key)
                if not image_type:
                    outcome.ask(
                        key,
                        "Image Type",
                        description=(
                            f"Choose whether the image {linkify_src(src, ctx.url)} is a purely decorative image "
                            "or part of informative content."
                        ),
                        options=IMAGE_TYPE_OPTIONS,
                        default="content",
                    )
                elif image_type == "content":
                    outcome.error(
                        "The following image has an empty alt attribute although it is informative. "
                        "An empty alt attribute is only acceptable for non-informative images.",
                        "empty_alt_attribute_content",
                        image,
                    )
                elif image.get_attribute("title"):
                    outcome.warning(
                        "The following non-informative image uses the title attribute.",
                        "usage_of_title_attribute_layout",
                        image,
                    )
                continue

            if src and alt in src:
                outcome.error(
                    "The following image seems to have an auto-generated alt attribute. "
                    "Alternative texts should describe the image in clear human language.",
                    "alt_attribute_part_of_src",
                    image,
                )
            elif alt.strip().lower() in denylist:
                outcome.error(
                    "The following image uses a non-descriptive alt attribute. Alternative texts should "
                    "describe the image in clear human language, or be empty for decorative images.",
                    "non_descriptive_alternative_text",
                    image,
                )
            elif len(alt) > cfg.max_alt_length:
                outcome.error(
                    "The following image uses a very long alt attribute. If a longer description is "
                    "necessary for the image, the longdesc attribute should be used.",
                    "alternative_text_too_long",
                    image,
                )

        outcome.finish("All images in the HTML code have valid alt attributes provided.")
