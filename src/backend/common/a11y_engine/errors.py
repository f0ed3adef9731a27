from __future__ import annotations


class CheckError(Exception):
    """Base class for errors surfaced to callers.

    ``code`` is stable and machine readable; ``str(exc)`` is a short message
    safe to show to an end user.
    """

    code = "check_error"
    default_message = "The check could not be processed."

    def __init__(self, message: str | None = None, *, code: str | None = None):
        super().__init__(message or self.default_message)
        if code:
            self.code = code


class InvalidArgumentsError(CheckError):
    code = "invalid_arguments"
    default_message = "Either a URL or HTML code must be provided, but not both."


class FetchHtmlError(CheckError):
    code = "could_not_fetch_html"
    default_message = "The HTML code could not be retrieved from the URL."


class HtmlParseError(CheckError):
    code = "could_not_parse_html"
    default_message = "The HTML code could not be parsed."


class CheckNotFoundError(CheckError):
    code = "invalid_id"
    default_message = "No check exists for the given ID."


class DomainNotFoundError(CheckError):
    code = "domain_not_found"
    default_message = "No domain exists for the given name."


class RuleNotFoundError(CheckError):
    code = "test_not_found"
    default_message = "The requested test does not exist."


class PersistenceError(CheckError):
    code = "could_not_store_check"
    default_message = "The data could not be stored."


class ValidatorUnavailableError(RuntimeError):
    """Raised by validator implementations when no issue list could be obtained."""
