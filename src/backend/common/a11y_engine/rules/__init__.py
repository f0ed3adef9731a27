from .graphical_ui_alternative_texts_links import GraphicalUIAlternativeTextsLinks
from .graphical_ui_alternative_texts_buttons import GraphicalUIAlternativeTextsButtons
from .graphical_ui_alternative_texts_image_maps import GraphicalUIAlternativeTextsImageMaps
from .images_alternative_texts import ImagesAlternativeTexts
from .objects_alternative_texts import ObjectsAlternativeTexts
from .captchas_alternative_texts import CaptchasAlternativeTexts
from .captcha_alternatives import CaptchaAlternatives
from .video_alternatives import VideoAlternatives
from .structural_headings import StructuralHeadings
from .structural_lists import StructuralLists
from .structural_quotes import StructuralQuotes
from .table_markup import TableMarkup
from .organized_content import OrganizedContent
from .organized_select_lists import OrganizedSelectLists
from .misuse_typographical_characters import MisuseTypographicalCharacters
from .dynamically_inserted_content import DynamicallyInsertedContent
from .keyboard_controls_tabindex import KeyboardControlsTabindex
from .timing_adjustable import TimingAdjustable
from .structured_content_areas_headings import StructuredContentAreasHeadings
from .structured_content_areas_frames import StructuredContentAreasFrames
from .helpful_link_texts import HelpfulLinkTexts
from .multiple_ways import MultipleWays
from .document_language import DocumentLanguage
from .form_control_labels import FormControlLabels
from .deprecated_usage import DeprecatedUsage
from .valid_html import ValidHtml
from .ui_components_roles import UIComponentsRoles

# Rules run in WCAG success-criterion order, not alphabetically.
CATALOG_ORDER = (
    GraphicalUIAlternativeTextsLinks.slug,
    GraphicalUIAlternativeTextsButtons.slug,
    GraphicalUIAlternativeTextsImageMaps.slug,
    ImagesAlternativeTexts.slug,
    ObjectsAlternativeTexts.slug,
    CaptchasAlternativeTexts.slug,
    CaptchaAlternatives.slug,
    VideoAlternatives.slug,
    StructuralHeadings.slug,
    StructuralLists.slug,
    StructuralQuotes.slug,
    TableMarkup.slug,
    OrganizedContent.slug,
    OrganizedSelectLists.slug,
    MisuseTypographicalCharacters.slug,
    DynamicallyInsertedContent.slug,
    KeyboardControlsTabindex.slug,
    TimingAdjustable.slug,
    StructuredContentAreasHeadings.slug,
    StructuredContentAreasFrames.slug,
    HelpfulLinkTexts.slug,
    MultipleWays.slug,
    DocumentLanguage.slug,
    FormControlLabels.slug,
    DeprecatedUsage.slug,
    ValidHtml.slug,
    UIComponentsRoles.slug,
)

__all__ = [
    "CATALOG_ORDER",
    "GraphicalUIAlternativeTextsLinks",
    "GraphicalUIAlternativeTextsButtons",
    "GraphicalUIAlternativeTextsImageMaps",
    "ImagesAlternativeTexts",
    "ObjectsAlternativeTexts",
    "CaptchasAlternativeTexts",
    "CaptchaAlternatives",
    "VideoAlternatives",
    "StructuralHeadings",
    "StructuralLists",
    "StructuralQuotes",
    "TableMarkup",
    "OrganizedContent",
    "OrganizedSelectLists",
    "MisuseTypographicalCharacters",
    "DynamicallyInsertedContent",
    "KeyboardControlsTabindex",
    "TimingAdjustable",
    "StructuredContentAreasHeadings",
    "StructuredContentAreasFrames",
    "HelpfulLinkTexts",
    "MultipleWays",
    "DocumentLanguage",
    "FormControlLabels",
    "DeprecatedUsage",
    "ValidHtml",
    "UIComponentsRoles",
]
