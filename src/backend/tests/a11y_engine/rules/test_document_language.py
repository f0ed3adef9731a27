import pytest

from common.a11y_engine.models import ResultType
from common.a11y_engine.rules.document_language import DocumentLanguage, is_lang_valid

XHTML_DOCTYPE = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">'
)


@pytest.mark.parametrize("lang, valid", [("en", True), ("de-DE", True), ("zh-Hant", True), ("english", False), ("en_US", False)])
def test_is_lang_valid(lang, valid):
    assert is_lang_valid(lang) is valid


def test_valid_lang_passes(make_ctx):
    res = DocumentLanguage().evaluate(make_ctx('<!DOCTYPE html><html lang="en"><body><p>x</p></body></html>'))
    assert res.type == ResultType.SUCCESS


def test_missing_lang(make_ctx):
    res = DocumentLanguage().evaluate(make_ctx("<!DOCTYPE html><html><body><p>x</p></body></html>"))
    assert res.type == ResultType.ERROR
    assert res.message_codes == ["missing_lang_attribute"]


def test_invalid_lang(make_ctx):
    res = DocumentLanguage().evaluate(make_ctx('<html lang="english"><body><p>x</p></body></html>'))
    assert res.message_codes == ["invalid_lang_attribute"]


def test_xhtml_documents_need_xml_lang(make_ctx):
    html = f'{XHTML_DOCTYPE}<html xmlns="http://www.w3.org/1999/xhtml" lang="en"><body><p>x</p></body></html>'
    res = DocumentLanguage().evaluate(make_ctx(html))
    assert res.message_codes == ["missing_xml_lang_attribute"]

    html = f'{XHTML_DOCTYPE}<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="en"><body><p>x</p></body></html>'
    assert DocumentLanguage().evaluate(make_ctx(html)).type == ResultType.SUCCESS
