from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.organized_content import OrganizedContent


def test_clean_markup_passes(make_ctx):
    html = "<p>One<br>two</p><p><strong>Bold</strong> and <em>em</em></p>"
    res = OrganizedContent().evaluate(make_ctx(html))
    assert res.type == ResultType.SUCCESS


def test_double_break_is_reported_once(make_ctx):
    res = OrganizedContent().evaluate(make_ctx("<p>First<br>\n<br>Second</p>"))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["misuse_of_br_tag"]
    assert res.messages[0].code == "<br><br>"


def test_presentational_b_and_i_tags(make_ctx):
    html = '<p><b>Bold</b> <i>Italic</i> <i class="fa fa-home"></i> <i aria-hidden="true">x</i></p>'
    res = OrganizedContent().evaluate(make_ctx(html))
    assert res.message_codes == ["misuse_of_b_tag", "misuse_of_i_tag"]


def test_iconfont_prefix_from_global_option(make_ctx):
    html = '<p><i class="icon-home">Home</i></p>'
    assert OrganizedContent().evaluate(make_ctx(html)).message_codes == ["misuse_of_i_tag"]
    ctx = make_ctx(html, options={"global_iconfont": "fa-, icon-"})
    assert OrganizedContent().evaluate(ctx).type == ResultType.SUCCESS


def test_radio_and_checkbox_groups_need_fieldset(make_ctx):
    html = (
        "<form><div>"
        '<label><input type="radio" name="size" value="s"> S</label>'
        '<label><input type="radio" name="size" value="m"> M</label>'
        "</div><div>"
        '<input type="checkbox" name="a"><input type="checkbox" name="b">'
        "</div>"
        '<input type="checkbox" name="terms">'
        "</form>"
    )
    res = OrganizedContent().evaluate(make_ctx(html))
    assert res.message_codes == ["missing_fieldset_for_radio_group", "missing_fieldset_for_checkbox_group"]
    assert res.messages[0].code.count("<input") == 2


def test_forms_with_fieldset_are_fine(make_ctx):
    html = (
        '<form><fieldset><legend>Size</legend><input type="radio" name="s"><input type="radio" name="s">'
        "</fieldset></form>"
    )
    assert OrganizedContent().evaluate(make_ctx(html)).type == ResultType.SUCCESS
