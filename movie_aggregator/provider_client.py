"""
Provider client module.
The single point of outbound I/O: builds OMDb-style queries, issues GETs and decodes JSON.
Any failure (status, transport, timeout, decode, Response=False) is reported as "not found".
"""

from typing import Any, Dict, List, Optional

import requests  # HTTP client with connection pooling

from loguru import logger  # console logger

from .config import Settings
from .models import DetailRecord, SearchHit


class ProviderClient:
	"""
	Thin wrapper around the metadata provider.
	One instance (and one requests.Session) lives for the whole process.
	"""

	def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
		self.settings = settings
		self.session = session or requests.Session()
		self.session.headers.update({"User-Agent": settings.user_agent})

	def _get_json(self, params: Dict[str, str]) -> Optional[Dict[str, Any]]:
		"""Issue one GET and return the decoded body, or None on any failure."""
		query = {"apikey": self.settings.api_key, **params}
		try:
			resp = self.session.get(self.settings.base_url, params=query, timeout=self.settings.timeout_seconds)
		except requests.RequestException as e:
			logger.warning(f"[Provider] Request failed for {params}: {e}")
			return None

		if resp.status_code != 200:
			logger.warning(f"[Provider] Status {resp.status_code} for {params}")
			return None

		try:
			body = resp.json()
		except ValueError as e:  # covers JSONDecodeError from requests/simplejson
			logger.warning(f"[Provider] Undecodable body for {params}: {e}")
			return None

		if not isinstance(body, dict):
			logger.warning(f"[Provider] Unexpected body type {type(body).__name__} for {params}")
			return None
		if body.get("Response") == "False":
			logger.debug(f"[Provider] No match for {params}: {body.get('Error', '')}")
			return None
		return body

	def _detail(self, params: Dict[str, str]) -> Optional[DetailRecord]:
		body = self._get_json(params)
		return DetailRecord.from_payload(body) if body is not None else None

	def fetch_detail_by_id(self, imdb_id: str) -> Optional[DetailRecord]:
		logger.debug(f"[Provider] Detail by id '{imdb_id}'")
		return self._detail({"i": imdb_id, "plot": "short"})

	def fetch_detail_by_title(self, title: str, plot: str = "short") -> Optional[DetailRecord]:
		logger.debug(f"[Provider] Detail by title '{title}' (plot={plot})")
		return self._detail({"t": title, "plot": plot})

	def fetch_episode(self, series_title: str, season: str, episode: str) -> Optional[DetailRecord]:
		logger.debug(f"[Provider] Episode '{series_title}' S{season}E{episode}")
		return self._detail({"t": series_title, "Season": season, "Episode": episode, "plot": "full"})

	def search_by_keyword(self, keyword: str, page: int = 1) -> List[SearchHit]:
		"""Return the hits of one search page; empty when the search fails."""
		logger.debug(f"[Provider] Search '{keyword}' page {page}")
		body = self._get_json({"s": keyword, "page": str(page)})
		if body is None:
			return []
		rows = body.get("Search")
		if not isinstance(rows, list):
			return []
		return [SearchHit.from_payload(row) for row in rows if isinstance(row, dict)]
