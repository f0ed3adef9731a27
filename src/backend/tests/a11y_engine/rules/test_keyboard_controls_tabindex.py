from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.keyboard_controls_tabindex import KeyboardControlsTabindex, parse_tabindex


def test_parse_tabindex():
    assert parse_tabindex(" 3 ") == 3
    assert parse_tabindex("-1") == -1
    assert parse_tabindex("abc") == 0


def test_skips_without_tabindex(make_ctx):
    assert KeyboardControlsTabindex().evaluate(make_ctx("<a href='/'>x</a>")).type == ResultType.SKIPPED


def test_positive_and_negative_values(make_ctx):
    html = '<a href="/" tabindex="3">a</a><div tabindex="-1">b</div><div tabindex="0">c</div>'
    res = KeyboardControlsTabindex().evaluate(make_ctx(html))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["tabindex_greater_than_0", "tabindex_minus_1"]


def test_minus_one_alone_is_a_warning(make_ctx):
    res = KeyboardControlsTabindex().evaluate(make_ctx('<div tabindex="-1">b</div>'))
    assert res.type == ResultType.WARNING


def test_zero_passes(make_ctx):
    assert KeyboardControlsTabindex().evaluate(make_ctx('<div tabindex="0">c</div>')).type == ResultType.SUCCESS
