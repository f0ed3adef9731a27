from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.ui_components_roles import UIComponentsRoles


def test_skips_without_placeholder_links(make_ctx):
    assert UIComponentsRoles().evaluate(make_ctx('<a href="/">Home</a>')).type == ResultType.SKIPPED


def test_placeholder_link_without_role_fails(make_ctx):
    html = '<a href="#">Open menu</a><a href="#" role="button">Close</a>'
    res = UIComponentsRoles().evaluate(make_ctx(html))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["missing_role_attribute"]
    assert "Open menu" in res.messages[0].code


def test_placeholder_link_with_role_passes(make_ctx):
    assert UIComponentsRoles().evaluate(make_ctx('<a href="#" role="button">Close</a>')).type == ResultType.SUCCESS
