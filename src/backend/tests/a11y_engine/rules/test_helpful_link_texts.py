from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.helpful_link_texts import HelpfulLinkTexts, link_text, non_html_keywords


def test_link_text_uses_aria_label_then_content(make_dom):
    dom = make_dom(
        '<a id="a" href="/" aria-label=" Company home "><img src="logo.png"></a>'
        '<a id="b" href="/about"><img src="a.png" alt="About"> us</a>'
    )
    assert link_text(dom.find("#a", single=True)) == "Company home"
    assert link_text(dom.find("#b", single=True)) == "About us"


def test_non_html_keywords():
    assert non_html_keywords("files/report.PDF")[0] == "pdf"
    assert non_html_keywords("mailto:info@example.com") == ("email", "mail")
    assert non_html_keywords("/about") is None


def test_skips_without_links(make_ctx):
    assert HelpfulLinkTexts().evaluate(make_ctx("<p>x</p>")).type == ResultType.SKIPPED


def test_missing_link_text(make_ctx):
    res = HelpfulLinkTexts().evaluate(make_ctx('<a href="/x"><img src="x.png"></a>'))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["missing_link_text"]


def test_duplicate_text_with_different_target(make_ctx):
    html = '<a href="/a">Products</a><a href="/a">Products</a><a href="/b">products</a>'
    res = HelpfulLinkTexts().evaluate(make_ctx(html))
    assert res.message_codes == ["duplicate_link_text"]


def test_non_descriptive_texts(make_ctx):
    res = HelpfulLinkTexts().evaluate(make_ctx('<a href="/news/1">Read more!</a>'))
    assert res.message_codes == ["non_descriptive_link_text"]


def test_file_targets_need_type_in_text(make_ctx):
    html = (
        '<a href="report.pdf">Annual report</a>'
        '<a href="slides.pdf">Slides (PDF)</a>'
        '<a href="mailto:info@example.com">Contact</a>'
        '<a href="tel:+123">Call us</a>'
    )
    res = HelpfulLinkTexts().evaluate(make_ctx(html))
    assert res.message_codes == ["missing_non_html_content_link_text", "missing_non_html_content_link_text"]


def test_descriptive_links_pass(make_ctx):
    html = '<a name="top">Top</a><a href="/about">About the company</a><a href="/jobs">Open positions</a>'
    assert HelpfulLinkTexts().evaluate(make_ctx(html)).type == ResultType.SUCCESS
