from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)


class RuleConfigBase(BaseModel):
    enabled: bool = True


class ImagesAlternativeTextsRuleConfig(RuleConfigBase):
    # Alternative texts longer than this should move to a longdesc.
    max_alt_length: int = 80
    non_descriptive_alt_texts: List[str] = Field(
        default_factory=lambda: ["spacer", "placeholder", "empty", "leer"]
    )


class ObjectsAlternativeTextsRuleConfig(RuleConfigBase):
    max_alt_length: int = 80


class CaptchasAlternativeTextsRuleConfig(RuleConfigBase):
    non_descriptive_alt_texts: List[str] = Field(default_factory=lambda: ["captcha"])


class StructuralHeadingsRuleConfig(RuleConfigBase):
    # A page "clearly has multiple content areas" at this many articles ...
    min_articles_for_multiple_areas: int = 2
    # ... or with more sectioning elements than this.
    max_sectioning_elements_for_single_area: int = 3


class StructuralListsRuleConfig(RuleConfigBase):
    # Navigation with more links than this should be a list.
    max_nav_links_without_list: int = 3


class StructuredContentAreasFramesRuleConfig(RuleConfigBase):
    position_words: List[str] = Field(
        default_factory=lambda: ["top", "bottom", "left", "right", "center", "middle", "header", "footer"]
    )


class HelpfulLinkTextsRuleConfig(RuleConfigBase):
    non_descriptive_link_texts: List[str] = Field(
        default_factory=lambda: ["continue reading", "read more", "more", "continue", "click here", "here"]
    )


class TimingAdjustableRuleConfig(RuleConfigBase):
    # Refresh delays at or below this many seconds are tolerated (0 = any delay fails).
    max_refresh_seconds: int = 0


class ValidHtmlRuleConfig(RuleConfigBase):
    # Validator messages containing any of these are owned by other rules.
    ignored_message_patterns: List[str] = Field(
        default_factory=lambda: [
            " role is unnecessary for element",
            " does not need a “role” attribute",
            " must have an “alt” attribute",
            " is missing required attribute “alt”",
            " document appears to be written in",
        ]
    )


class RulesConfig(BaseModel):
    """Per-deployment configuration for all rules.

    Rules pull their typed config via `get_rule_config`.
    """

    rules: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_rule_config(
        self,
        slug: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if slug not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.rules.get(slug, {})
        return model.model_validate(raw)
