"""
Title resolution module.
Turns a free-text title into a detail record, falling back to keyword search when the exact lookup misses.
"""

from typing import Optional

from loguru import logger  # console logger

from .models import DetailRecord
from .provider_client import ProviderClient


class TitleResolver:
	"""
	Exact lookups upstream only match the canonical title, so a miss is retried
	through keyword search plus per-hit id lookups to recover near matches.
	"""

	# Search pages scanned on fallback, never more
	SEARCH_PAGES = (1, 2)

	def __init__(self, provider: ProviderClient):
		self.provider = provider

	def resolve(self, title: str) -> Optional[DetailRecord]:
		"""Return the first matching detail record, or None when nothing matches."""
		record = self.provider.fetch_detail_by_title(title)
		if record is not None and record.response == "True":
			logger.debug(f"[Resolver] Direct hit for '{title}' -> {record.imdb_id}")
			return record

		logger.debug(f"[Resolver] Direct lookup missed for '{title}', trying keyword search")
		for page in self.SEARCH_PAGES:
			for hit in self.provider.search_by_keyword(title, page):
				if not hit.imdb_id:
					continue
				detail = self.provider.fetch_detail_by_id(hit.imdb_id)
				if detail is not None:
					logger.info(f"[Resolver] Resolved '{title}' via search page {page} -> {hit.imdb_id}")
					return detail

		logger.info(f"[Resolver] Could not resolve '{title}'")
		return None
