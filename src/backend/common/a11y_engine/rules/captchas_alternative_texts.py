from __future__ import annotations

from ..config import CaptchasAlternativeTextsRuleConfig
from ..context import RuleContext
from ..helpers import is_captcha
from ..models import RuleLink
from ..outcome import RuleOutcome
from ..registry import register_rule
from ..rule import Rule


@register_rule
class CaptchasAlternativeTexts(Rule):
    slug = "captchas_alternative_texts"
    title = "Alternative texts for CAPTCHAs"
    description = (
        "For image-based CAPTCHAs, the alternative text should describe the purpose of the CAPTCHA and "
        "where to find a non-image-based alternative."
    )
    guideline_title = "1.1.1 Non-text Content"
    guideline_anchor = "text-equiv-all"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/G143",
            title="Providing a text alternative that describes the purpose of the CAPTCHA",
        ),
    )
    config_model = CaptchasAlternativeTextsRuleConfig

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        cfg = self.get_config(ctx)
        denylist = {word.strip().lower() for word in cfg.non_descriptive_alt_texts}

        captchas = [image for image in ctx.dom.find("img") if is_captcha(image)]
        if not captchas:
            outcome.skip("There are no CAPTCHAs in the HTML code provided. Therefore this test was skipped.")
            return

        for image in captchas:
            alt = (image.get_attribute("alt") or "").strip()
            if not alt:
                outcome.error(
                    "The following CAPTCHA is missing an alternative text.",
                    "error_missing_alternative_text",
                    image,
                )
            elif alt.lower() in denylist:
                outcome.error(
                    "The following CAPTCHA does not have a helpful alternative text.",
                    "error_non_descriptive_alternative_text",
                    image,
                )

        outcome.finish("All CAPTCHAs in the HTML code have valid alt attributes provided.")
