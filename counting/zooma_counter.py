"""
Counter that overlays ZOOMA data-annotation counts on the hierarchy.

One SPARQL query is sent to the ZOOMA query endpoint, counting the distinct
data annotations per semantic tag for a single datasource.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from core.constants import (
    ZOOMA_COUNT_QUERY,
    ZOOMA_DEFAULT_DATASOURCE,
    ZOOMA_QUERY_URL,
)
from core.exceptions import CounterInitializationError
from .lookup_counter import LookupNodeCounter

logger = logging.getLogger(__name__)


def build_count_query(datasource: str) -> str:
    """Fill the datasource into the ZOOMA count query."""
    return ZOOMA_COUNT_QUERY.replace("{datasource}", datasource)


class ZoomaNodeCounter(LookupNodeCounter):
    """
    Node counter backed by the ZOOMA annotation service.
    """

    def __init__(
        self,
        datasource: Optional[str] = None,
        query_url: str = ZOOMA_QUERY_URL,
        timeout: float = 60.0,
        client: Optional[httpx.Client] = None,
        default_datasource: str = ZOOMA_DEFAULT_DATASOURCE
    ):
        """
        Initialize ZOOMA counter.

        Args:
            datasource: Datasource URI to filter annotations by (default: GWAS catalog)
            query_url: ZOOMA SPARQL query endpoint
            timeout: Request timeout in seconds
            client: Optional preconfigured HTTP client, not closed by this counter
            default_datasource: Datasource used when `datasource` is None
        """
        super().__init__()
        self.datasource = datasource or default_datasource
        self.query_url = query_url
        self.timeout = timeout
        self._client = client
        logger.debug("Utilizing ZOOMA datasource '%s'", self.datasource)

    def query_params(self) -> Dict[str, str]:
        return {
            "query": build_count_query(self.datasource),
            "format": "JSON",
            "inference": "false",
        }

    def lookup_counts(self) -> None:
        payload = self._fetch()

        try:
            bindings = payload["results"]["bindings"]
        except (KeyError, TypeError):
            bindings = None
        if not isinstance(bindings, list):
            logger.warning("ZOOMA response contained no result bindings, no counts acquired")
            return

        datapoints = 0
        terms = 0
        for binding in bindings:
            try:
                uri, count = self._parse_binding(binding)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed ZOOMA result %r: %s", binding, e)
                continue

            self.set_count(uri, count)
            logger.debug("Got next result: %s -> %d", uri, count)
            datapoints += count
            if count > 0:
                terms += 1

        logger.info("Fetched %d datapoints for %d terms from ZOOMA", datapoints, terms)

    def _fetch(self) -> Any:
        logger.debug("Despatching ZOOMA query to %s", self.query_url)
        try:
            if self._client is not None:
                response = self._client.get(self.query_url, params=self.query_params())
            else:
                with httpx.Client(timeout=httpx.Timeout(self.timeout)) as client:
                    response = client.get(self.query_url, params=self.query_params())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CounterInitializationError(
                f"ZOOMA server returned error: {e.response.status_code} - {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise CounterInitializationError(
                f"Could not query ZOOMA at {self.query_url}: {e}"
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise CounterInitializationError(
                f"Invalid JSON response from ZOOMA: {response.text[:200]}"
            ) from e

    @staticmethod
    def _parse_binding(binding: Dict[str, Any]):
        uri = binding["semantictag"]["value"]
        if not isinstance(uri, str) or not uri.strip():
            raise ValueError("semantictag has no value")
        count = int(binding["datapoints"]["value"])
        if count < 0:
            raise ValueError(f"negative datapoints count {count}")
        return uri.strip(), count
