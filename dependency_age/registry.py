"""
Maven Central search client for artifact publication dates.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Optional

import requests

from .interfaces import RegistryClient
from .models import DependencyRecord, LookupResult, LookupStatus
from .time_utils import epoch_millis_to_local


logger = logging.getLogger(__name__)

DEFAULT_SEARCH_URL = "https://search.maven.org/solrsearch/select"


class ArtifactNotFoundError(LookupError):
    """The registry has no entry for a group/artifact/version triple."""

    def __init__(self, group: str, artifact: str, version: str) -> None:
        self.coordinate = f"{group}:{artifact}:{version}"
        super().__init__(f"No registry entry for {self.coordinate}")


def build_search_params(group: str, artifact: str, version: str) -> Dict[str, str]:
    """Query parameters selecting exactly one artifact version."""
    return {
        "q": f'g:"{group}" AND a:"{artifact}" AND v:"{version}"',
        "rows": "1",
        "wt": "json",
    }


class MavenCentralClient(RegistryClient):
    """Look up publication timestamps in the Maven Central search API."""

    def __init__(
        self,
        search_url: str = DEFAULT_SEARCH_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.search_url = search_url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def fetch_publication_date(self, group: str, artifact: str, version: str) -> datetime:
        """Return the local publication date of ``group:artifact:version``.

        Raises:
            ArtifactNotFoundError: the search returned no rows
            requests.RequestException: the request failed
        """
        params = build_search_params(group, artifact, version)
        logger.debug("Searching %s for %s:%s:%s", self.search_url, group, artifact, version)
        with self.session.get(self.search_url, params=params, timeout=self.timeout) as response:
            response.raise_for_status()
            data = response.json()

        docs = data.get("response", {}).get("docs", [])
        if not docs:
            raise ArtifactNotFoundError(group, artifact, version)
        return epoch_millis_to_local(int(docs[0]["timestamp"]))

    def lookup(self, record: DependencyRecord) -> LookupResult:
        try:
            published_at = self.fetch_publication_date(
                record.group, record.artifact, record.version
            )
        except ArtifactNotFoundError:
            return LookupResult(record=record, status=LookupStatus.NOT_FOUND)
        except (requests.RequestException, ValueError, KeyError) as e:
            logger.debug("Lookup failed for %s: %s", record.coordinate, e)
            return LookupResult(record=record, status=LookupStatus.ERROR, error=e)
        return LookupResult(record=record, status=LookupStatus.FOUND, published_at=published_at)
