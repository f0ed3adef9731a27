from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.objects_alternative_texts import ObjectsAlternativeTexts


def test_skips_without_objects(make_ctx):
    assert ObjectsAlternativeTexts().evaluate(make_ctx("<p>x</p>")).type == ResultType.SKIPPED


def test_object_without_content_fails(make_ctx):
    html = '<object data="movie.swf"><param name="autoplay" value="false"></object>'
    res = ObjectsAlternativeTexts().evaluate(make_ctx(html))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["missing_alternative_content"]


def test_embed_never_has_alternative_content(make_ctx):
    res = ObjectsAlternativeTexts().evaluate(make_ctx('<embed src="movie.swf">'))
    assert res.message_codes == ["missing_alternative_content"]


def test_image_fallback_needs_a_good_alt(make_ctx):
    html = (
        '<object data="a.swf"><img src="a.png"></object>'
        '<object data="b.swf"><img src="intro.png" alt="intro"></object>'
    )
    res = ObjectsAlternativeTexts().evaluate(make_ctx(html))
    assert res.message_codes == ["missing_alt_attribute", "alt_attribute_part_of_src"]


def test_text_or_described_image_passes(make_ctx):
    html = (
        '<object data="a.swf">An animated company logo.</object>'
        '<object data="b.swf"><img src="b.png" alt="Product tour"></object>'
    )
    assert ObjectsAlternativeTexts().evaluate(make_ctx(html)).type == ResultType.SUCCESS
