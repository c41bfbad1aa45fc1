"""
Candidate collection module.
Samples the catalog with a list of generic seed keywords and keeps the titles whose
selected attribute (genre, director or actors) contains the requested value.
"""

from dataclasses import replace
from typing import Dict, List, Sequence, Set

from loguru import logger  # console logger

from .config import DEFAULT_SEED_KEYWORDS
from .models import DetailRecord, MatchField
from .provider_client import ProviderClient


class KeywordCandidateCollector:
	"""
	Collects detail records by probing the provider with seed keywords.
	All calls are sequential; a single invocation may issue dozens of requests.
	"""

	def __init__(self, provider: ProviderClient, seed_keywords: Sequence[str] = DEFAULT_SEED_KEYWORDS):
		self.provider = provider
		self.seed_keywords = list(seed_keywords)

	def collect(
		self,
		attribute_filter: str,
		limit: int,
		field: MatchField = MatchField.GENRE,
	) -> List[DetailRecord]:
		"""
		Return up to `limit` records whose `field` contains `attribute_filter`
		(case-insensitive substring). Records come back in admission order with unique ids.
		"""
		needle = (attribute_filter or '').strip().lower()
		if not needle or limit <= 0:
			return []

		found: Dict[str, DetailRecord] = {}  # imdbID -> record, the dedup set
		examined: Set[str] = set()  # search-hit ids and canonical record ids already fetched, admitted or not

		for keyword in self.seed_keywords:
			for hit in self.provider.search_by_keyword(keyword, 1):
				if not hit.imdb_id or hit.imdb_id in examined:
					continue
				examined.add(hit.imdb_id)

				detail = self.provider.fetch_detail_by_id(hit.imdb_id)
				if detail is None:
					continue

				if not detail.imdb_id:
					detail = replace(detail, imdb_id=hit.imdb_id)
				# Old or merged ids can resolve to a record already collected
				if detail.imdb_id in found:
					continue
				examined.add(detail.imdb_id)
				if needle not in detail.attribute(field).lower():
					continue

				found[detail.imdb_id] = detail
				if len(found) >= limit:
					break
			if len(found) >= limit:
				break

		logger.debug(
			f"[Collector] {field.value}~'{attribute_filter}': admitted {len(found)}/{limit} "
			f"after examining {len(examined)} titles"
		)
		return list(found.values())
