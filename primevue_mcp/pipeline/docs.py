"""
Documentation Fetcher

Builds docs.json by scraping each component's page on the documentation
site for a title, a short description and markup examples.

Requests run one at a time with a fixed politeness delay. A failed page
is logged and skipped; nothing is retried.
"""

import time
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from bs4 import BeautifulSoup

from primevue_mcp.configs import get_logger, get_timeout
from primevue_mcp.configs.constants import DOCS_BASE_URL, DOCS_REQUEST_DELAY
from primevue_mcp.exceptions import ClientError
from primevue_mcp.pipeline.io import read_json_safe, write_json
from primevue_mcp.utils.http_client import http_get_text

logger = get_logger("pipeline.docs")


def parse_component_page(html: str) -> dict[str, Any]:
    """
    Extract title, description and examples from a documentation page.

    - title: text of the first <h1>
    - description: text of the first <p>
    - examples: every ``pre code`` block containing markup (a "<")

    Empty title/description are omitted.
    """
    soup = BeautifulSoup(html, "lxml")
    page: dict[str, Any] = {}

    h1 = soup.find("h1")
    title = h1.get_text().strip() if h1 else ""
    if title:
        page["title"] = title

    paragraph = soup.find("p")
    description = paragraph.get_text().strip() if paragraph else ""
    if description:
        page["description"] = description

    examples = []
    for block in soup.select("pre code"):
        code = block.get_text().strip()
        if "<" in code:
            examples.append(code)
    page["examples"] = examples

    return page


class DocsFetcher:
    """Sequential, throttled documentation scraper."""

    def __init__(
        self,
        base_url: str = DOCS_BASE_URL,
        delay: float = DOCS_REQUEST_DELAY,
        timeout: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base_url = base_url.rstrip("/")
        self.delay = delay
        self.timeout = timeout if timeout is not None else get_timeout("docs_request")
        self._sleep = sleep

    def page_url(self, component: str) -> str:
        return f"{self.base_url}/{component}/"

    def fetch(self, component: str) -> Optional[dict[str, Any]]:
        """
        Fetch and parse one component page.

        Returns:
            Parsed page data, or None when the request failed
        """
        url = self.page_url(component)
        logger.info(f"Fetching docs for: {component}")

        try:
            html = http_get_text(url, timeout=self.timeout)
        except ClientError as e:
            logger.warning(f"Skipped {component}: {e}")
            return None

        return parse_component_page(html)

    def fetch_all(self, components: Iterable[str]) -> dict[str, dict[str, Any]]:
        """
        Fetch documentation for each component in order.

        Components whose page could not be fetched are absent from the result.
        """
        docs: dict[str, dict[str, Any]] = {}
        for component in components:
            data = self.fetch(component)
            if data is not None:
                docs[component] = data
            if self.delay > 0:
                self._sleep(self.delay)
        return docs


def run_docs_extraction(
    api_path: str | Path,
    output_path: str | Path,
    base_url: str = DOCS_BASE_URL,
    delay: float = DOCS_REQUEST_DELAY,
) -> dict[str, dict[str, Any]]:
    """Fetch docs for every component named in api.json and write docs.json."""
    components = list(read_json_safe(api_path).keys())
    if not components:
        logger.warning(f"No components found in {api_path}; run the signature extractor first")

    docs = DocsFetcher(base_url=base_url, delay=delay).fetch_all(components)
    write_json(output_path, docs)
    logger.info(f"Docs extracted for {len(docs)} of {len(components)} components -> {output_path}")
    return docs
