"""
HTTP client for the rank service.

The rank service stores the tier/division each chat user registered for
themselves. Balancing needs all of them at once, so the client issues a
single batched request and never retries; a failed lookup aborts the
balancing request.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable

import requests

from team_balance import RankLookupFailed, RankRecord
from team_balance.ranks import to_record

logger = logging.getLogger(__name__)


class RankClient:
    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 5.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, settings) -> "RankClient":
        return cls(settings.RANK_API_BASE_URL, settings.RANK_API_KEY, settings.RANK_API_TIMEOUT)

    def _headers(self) -> dict:
        return {"x-api-key": self.api_key} if self.api_key else {}

    def fetch_ranks(self, discord_ids: Iterable[str]) -> Dict[str, RankRecord]:
        ids = [str(i) for i in discord_ids]
        if not ids:
            return {}
        url = f"{self.base_url}/rank"
        try:
            response = self.session.get(
                url,
                params={"discordIds": ",".join(ids)},
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"Rank lookup for {len(ids)} users failed: {e}")
            raise RankLookupFailed(f"rank service unavailable: {e}") from e
        except ValueError as e:
            logger.error(f"Rank lookup returned invalid JSON: {e}")
            raise RankLookupFailed("rank service returned invalid JSON") from e

        return self._parse(data)

    def _parse(self, data) -> Dict[str, RankRecord]:
        if not isinstance(data, dict) or not isinstance(data.get("ranks", []), list):
            raise RankLookupFailed("rank service returned an unexpected payload")
        records: Dict[str, RankRecord] = {}
        for entry in data.get("ranks", []):
            if not isinstance(entry, dict) or not entry.get("discordId"):
                logger.warning(f"Skipping malformed rank entry: {entry!r}")
                continue
            records[str(entry["discordId"])] = to_record(entry)
        logger.debug(f"Fetched {len(records)} rank records")
        return records

    __call__ = fetch_ranks
