from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.structural_quotes import StructuralQuotes


def test_blockquote_passes(make_ctx):
    res = StructuralQuotes().evaluate(make_ctx("<blockquote><p>Quote</p></blockquote>"))
    assert res.type == ResultType.SUCCESS


def test_asks_about_quotes(make_ctx):
    res = StructuralQuotes().evaluate(make_ctx("<p>x</p>"))
    assert res.type == ResultType.INFO
    assert res.request_data[0].slug == "structural_quotes_has_blockquotes"


def test_answers_decide_the_verdict(make_ctx):
    ctx = make_ctx("<p>x</p>")
    assert StructuralQuotes().evaluate(ctx, args={"has_blockquotes": "yes"}).message_codes == [
        "error_missing_blockquote_markup_for_quotes"
    ]
    assert StructuralQuotes().evaluate(ctx, args={"has_blockquotes": "no"}).type == ResultType.SKIPPED
