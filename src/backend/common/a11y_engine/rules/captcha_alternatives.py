from __future__ import annotations

from ..context import RuleContext
from ..helpers import is_captcha, sanitize_src
from ..models import RuleLink
from ..outcome import YES_NO, RuleOutcome
from ..parser import Node
from ..registry import register_rule
from ..rule import Rule


def captcha_identifier(image: Node) -> str:
    image_id = image.get_attribute("id")
    if image_id:
        return sanitize_src(image_id)
    src = image.get_attribute("src")
    if src:
        return sanitize_src(src)
    return f"line_{image.get_line_no()}"


@register_rule
class CaptchaAlternatives(Rule):
    slug = "captcha_alternatives"
    title = "Alternatives for CAPTCHAs"
    description = "Every image-based CAPTCHA should have a non-image-based alternative provided."
    guideline_title = "1.1.1 Non-text Content"
    guideline_anchor = "text-equiv-all"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20-TECHS/G144",
            title="Ensuring that the Web Page contains another CAPTCHA serving the same purpose using a "
            "different modality",
        ),
    )
    may_request_data = True

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        captchas = [image for image in ctx.dom.find("img") if is_captcha(image)]
        if not captchas:
            outcome.skip("There are no CAPTCHAs in the HTML code provided. Therefore this test was skipped.")
            return

        for image in captchas:
            key = "has_alternative_" + captcha_identifier(image)
            answer = self.get_option(ctx, key)
            if not answer:
                outcome.ask(
                    key,
                    "CAPTCHA Alternative",
                    description=(
                        f"Does the CAPTCHA in line {image.get_line_no()} have a non-image based "
                        "alternative provided?"
                    ),
                    options=YES_NO,
                    default="no",
                )
            elif answer != "yes":
                outcome.error(
                    "The following CAPTCHA is missing a non-image based alternative.",
                    "error_missing_captcha_alternative",
                    image,
                )

        outcome.finish("All CAPTCHAs in the HTML code have valid non-image alternatives provided.")
