from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.structural_lists import StructuralLists

NAV = '<nav><a href="/a">A</a><a href="/b">B</a><a href="/c">C</a><a href="/d">D</a></nav>'


def test_list_markup_passes(make_ctx):
    assert StructuralLists().evaluate(make_ctx("<ul><li>a</li></ul>")).type == ResultType.SUCCESS


def test_asks_whether_page_has_lists(make_ctx):
    res = StructuralLists().evaluate(make_ctx("<p>x</p>"))
    assert res.type == ResultType.INFO
    assert res.request_data[0].slug == "structural_lists_has_lists"
    assert res.request_data[0].default == "yes"


def test_lists_without_markup_fail(make_ctx):
    res = StructuralLists().evaluate(make_ctx("<p>- a<br>- b</p>"), args={"has_lists": "yes"})
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["missing_list_markup"]


def test_no_lists_and_no_navigation_skips(make_ctx):
    res = StructuralLists().evaluate(make_ctx("<p>x</p>"), args={"has_lists": "no"})
    assert res.type == ResultType.SKIPPED


def test_navigation_without_list_markup_fails(make_ctx):
    res = StructuralLists().evaluate(make_ctx(NAV), args={"has_lists": "no"})
    assert res.message_codes == ["missing_list_markup_for_navigation"]


def test_short_navigation_is_fine(make_ctx):
    html = '<ul><li>x</li></ul><nav><a href="/a">A</a><a href="/b">B</a></nav>'
    assert StructuralLists().evaluate(make_ctx(html)).type == ResultType.SUCCESS
