from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.timing_adjustable import TimingAdjustable, refresh_delay

REFRESH = '<html><head><meta http-equiv="Refresh" content="5; url=/next"></head><body><p>x</p></body></html>'


def test_refresh_delay():
    assert refresh_delay("5; url=/next") == 5
    assert refresh_delay(" 30") == 30
    assert refresh_delay("url=/x") == 0
    assert refresh_delay(None) == 0


def test_delayed_refresh_fails(make_ctx):
    res = TimingAdjustable().evaluate(make_ctx(REFRESH))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["invalid_meta_refresh"]


def test_immediate_redirect_and_other_meta_pass(make_ctx):
    html = (
        '<html><head><meta http-equiv="refresh" content="0; url=/new">'
        '<meta http-equiv="content-type" content="text/html"></head><body></body></html>'
    )
    assert TimingAdjustable().evaluate(make_ctx(html)).type == ResultType.SUCCESS


def test_threshold_is_configurable(make_ctx):
    ctx = make_ctx(REFRESH, rules={"timing_adjustable": {"max_refresh_seconds": 10}})
    assert TimingAdjustable().evaluate(ctx).type == ResultType.SUCCESS
