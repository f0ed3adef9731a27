from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.deprecated_usage import DeprecatedUsage


def test_clean_markup_passes(make_ctx):
    html = '<p><strong>x</strong></p><table><tr><td align="left">1</td></tr></table><input type="text">'
    assert DeprecatedUsage().evaluate(make_ctx(html)).type == ResultType.SUCCESS


def test_deprecated_tags(make_ctx):
    res = DeprecatedUsage().evaluate(make_ctx('<center>x</center>\n<p><font color="red">y</font></p>'))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["deprecated_tag", "deprecated_tag"]
    assert "font is used in line 2" in res.messages[1].message


def test_deprecated_attributes(make_ctx):
    html = '<html><body bgcolor="white"><p>x</p></body></html>'
    assert DeprecatedUsage().evaluate(make_ctx(html)).message_codes == ["deprecated_attribute"]


def test_attributes_deprecated_with_specific_tags(make_ctx):
    html = '<img src="a.png" alt="A" border="0"><p align="center">x</p><ul type="disc"><li>a</li></ul>'
    res = DeprecatedUsage().evaluate(make_ctx(html))
    assert res.message_codes == ["deprecated_attribute_with_tag"] * 3
    assert [m.message.split(" is deprecated")[0] for m in res.messages] == [
        "The attribute border",
        "The attribute type",
        "The attribute align",
    ]
