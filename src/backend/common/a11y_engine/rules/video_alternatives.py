from __future__ import annotations

from typing import Optional

from ..context import RuleContext
from ..helpers import is_audio_file, is_video_file, linkify_src, sanitize_src
from ..models import RuleLink
from ..outcome import YES_NO, RuleOutcome
from ..parser import Node
from ..registry import register_rule
from ..rule import Rule

VIDEO_TYPE_OPTIONS = (("video_only", "Video-only"), ("has_audio", "Video with audio"))


def media_src(node: Node) -> Optional[str]:
    """Source of an object, embed, video or audio element."""
    tag = node.get_tag_name()
    if tag == "object":
        return node.get_attribute("data")
    if tag == "embed":
        return node.get_attribute("src")
    src = node.get_attribute("src")
    if src:
        return src
    source = node.find("source[src]", single=True)
    return source.get_attribute("src") if source is not None else None


def video_src(node: Node) -> Optional[str]:
    src = media_src(node)
    if not src:
        return None
    if node.get_tag_name() in ("object", "embed") and not is_video_file(src):
        return None
    return src


def audio_alternative(video: Node) -> Optional[Node]:
    for candidate in video.find("object,embed,audio"):
        if candidate.is_same_node(video):
            continue
        if is_audio_file(media_src(candidate)):
            return candidate
    return None


@register_rule
class VideoAlternatives(Rule):
    slug = "video_alternatives"
    title = "Alternatives for video content"
    description = (
        "Silent video files that convey information must have proper media alternatives. For visual video "
        "content an audio description is required."
    )
    guideline_title = "1.2.1 Audio-only and Video-only (Prerecorded)"
    guideline_anchor = "media-equiv-av-only-alt"
    links = (
        RuleLink(
            target="https://www.w3.org/TR/WCAG20/#media-equiv-audio-desc",
            title="1.2.3 Audio Description or Media Alternative (Prerecorded)",
        ),
        RuleLink(target="https://www.w3.org/TR/WCAG20-TECHS/H53", title="Using the body of the object element"),
    )
    may_request_data = True

    def run(self, ctx: RuleContext, outcome: RuleOutcome) -> None:
        videos = []
        for node in ctx.dom.find("object,embed,video"):
            src = video_src(node)
            if src:
                videos.append((node, src))

        if not videos:
            outcome.skip("There are no video files in the HTML code provided. Therefore this test was skipped.")
            return

        for video, src in videos:
            key = sanitize_src(src)
            if audio_alternative(video) is not None:
                continue

            video_type = self.get_option(ctx, "video_type_" + key)
            if not video_type:
                outcome.ask(
                    "video_type_" + key,
                    "Video Type",
                    description=(
                        f"Specify whether the video {linkify_src(src, ctx.url)} is video-only content or "
                        "whether it also contains audio."
                    ),
                    options=VIDEO_TYPE_OPTIONS,
                    default="has_audio",
                )
            elif video_type == "video_only":
                answer = self.get_option(ctx, "video_alternative_audio_or_text_" + key)
                if not answer:
                    outcome.ask(
                        "video_alternative_audio_or_text_" + key,
                        "Alternative Audio or Text available?",
                        description=(
                            "Specify whether an audio or text alternative is provided for the silent video "
                            f"{linkify_src(src, ctx.url)}."
                        ),
                        options=YES_NO,
                        default="no",
                    )
                elif answer == "yes":
                    outcome.warning(
                        "The alternative content for the following silent video should be located in the "
                        "element body.",
                        "warning_alternative_content_outside_of_body",
                        video,
                    )
                else:
                    outcome.error(
                        "The following silent video is missing an audio or text alternative.",
                        "error_missing_alternative_content",
                        video,
                    )
            else:
                answer = self.get_option(ctx, "video_alternative_audio_description_" + key)
                if not answer:
                    outcome.ask(
                        "video_alternative_audio_description_" + key,
                        "Alternative Audio Description available?",
                        description=(
                            f"Specify whether an audio description is provided for the video "
                            f"{linkify_src(src, ctx.url)}."
                        ),
                        options=YES_NO,
                        default="no",
                    )
                elif answer != "yes":
                    outcome.error(
                        "The following video is missing an audio description.",
                        "error_missing_audio_description",
                        video,
                    )

        outcome.finish("All videos in the HTML code have valid alternative content provided.")
