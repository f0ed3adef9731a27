from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from urllib.parse import urlparse

from adapters.html.title import extract_title
from common.a11y_engine.errors import (
    CheckNotFoundError,
    DomainNotFoundError,
    FetchHtmlError,
    HtmlParseError,
    InvalidArgumentsError,
    PersistenceError,
)
from common.a11y_engine.models import Check, Domain, RequestData, RequestOption
from common.a11y_engine.storage import Storage
from connectors.web.fetch import FetchError, fetch_html

logger = logging.getLogger(__name__)

# Options a caller may set when creating a check; stored as ``global_<slug>``.
GLOBAL_OPTIONS: Tuple[RequestData, ...] = (
    RequestData(
        slug="iconfont",
        type="text",
        label="Icon Font Class",
        description=(
            "If you are using icon fonts on your site, please specify a list of CSS class prefixes denoting "
            "them, separated by space."
        ),
        default="",
    ),
    RequestData(
        slug="layout_table_usage",
        type="select",
        label="Layout Tables",
        description="Does the site use tables for layout purposes?",
        options=[RequestOption(value="yes", label="Yes"), RequestOption(value="no", label="No")],
        default="yes",
    ),
)


@dataclass
class CheckService:
    """Creates, loads and deletes checks and the domains they share options with."""

    storage: Storage
    fetcher: Callable[[str], str] = fetch_html
    title_extractor: Callable[[str], str] = extract_title
    id_factory: Callable[[], str] = lambda: uuid.uuid4().hex

    def create_check(
        self,
        *,
        url: Optional[str] = None,
        html: Optional[str] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Check:
        if bool(url) == bool(html):
            raise InvalidArgumentsError()
        global_options = _validate_global_options(options or {})

        domain_name = None
        if url:
            domain_name = urlparse(url).hostname
            if not domain_name:
                raise InvalidArgumentsError(f"The URL {url} has no host name.")
            try:
                html = self.fetcher(url)
            except FetchError as exc:
                raise FetchHtmlError(f"An error occurred while trying to fetch the HTML code from the URL {url}.") from exc

        title = self.title_extractor(html or "")
        if not title:
            raise HtmlParseError()

        if domain_name:
            self._ensure_domain(domain_name)

        check = Check(id=self.id_factory(), url=url, html=html or "", title=title, domain=domain_name)
        if not self.storage.create_check(check):
            raise PersistenceError("An internal error occurred while trying to store the check.")

        try:
            for slug, value in global_options.items():
                if not self.storage.set_option(check.id, f"global_{slug}", value):
                    raise PersistenceError(f"The option {slug} could not be saved.", code="option_not_saved")
        except PersistenceError:
            self.storage.delete_check(check.id)
            raise

        logger.info("created check %s for %s", check.id, url or "submitted HTML")
        return self.get_check(check.id)

    def get_check(self, check_id: str) -> Check:
        check = self.storage.get_check(check_id)
        if check is None:
            raise CheckNotFoundError(f"No check exists for ID {check_id}.")
        return check

    def delete_check(self, check_id: str) -> None:
        self.get_check(check_id)
        if not self.storage.delete_check(check_id):
            raise PersistenceError("An internal error occurred while trying to delete the check.")

    def get_domain(self, name: str) -> Domain:
        domain = self.storage.get_domain(name)
        if domain is None:
            raise DomainNotFoundError(f"No domain exists for {name}.")
        return domain

    def _ensure_domain(self, name: str) -> Domain:
        domain = self.storage.get_domain(name)
        if domain is not None:
            return domain
        domain = Domain(name=name)
        if not self.storage.create_domain(domain):
            raise PersistenceError(f"The domain {name} could not be stored.")
        logger.debug("created domain %s", name)
        return domain


def _validate_global_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    known = {option.slug for option in GLOBAL_OPTIONS}
    cleaned: Dict[str, Any] = {}
    for key, value in options.items():
        slug = key[len("global_"):] if key.startswith("global_") else key
        if slug not in known:
            raise InvalidArgumentsError(f"Unknown option: {key}")
        cleaned[slug] = value
    return cleaned
