from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.structured_content_areas_frames import StructuredContentAreasFrames


def test_skips_without_frames(make_ctx):
    assert StructuredContentAreasFrames().evaluate(make_ctx("<p>x</p>")).type == ResultType.SKIPPED


def test_missing_title(make_ctx):
    res = StructuredContentAreasFrames().evaluate(make_ctx('<iframe src="map.html"></iframe>'))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["missing_title_attribute"]


def test_empty_title_asks_for_frame_type(make_ctx):
    ctx = make_ctx('<iframe src="ads.html" title=""></iframe>')
    res = StructuredContentAreasFrames().evaluate(ctx)
    assert res.type == ResultType.INFO
    assert res.request_data[0].slug == "structured_content_areas_frames_frame_type_ads--html"

    res = StructuredContentAreasFrames().evaluate(ctx, args={"frame_type_ads--html": "content"})
    assert res.message_codes == ["empty_title_attribute_content"]

    res = StructuredContentAreasFrames().evaluate(ctx, args={"frame_type_ads--html": "decorative"})
    assert res.type == ResultType.SUCCESS


def test_generated_and_positional_titles(make_ctx):
    html = '<iframe src="map.html" title="map"></iframe><iframe src="nav.html" title="Left navigation"></iframe>'
    res = StructuredContentAreasFrames().evaluate(make_ctx(html))
    assert res.message_codes == ["title_attribute_part_of_src", "title_attribute_contains_position"]


def test_position_words_match_whole_words(make_ctx):
    html = '<iframe src="embed.html" title="Store locator map with directions"></iframe>'
    assert StructuredContentAreasFrames().evaluate(make_ctx(html)).type == ResultType.SUCCESS
