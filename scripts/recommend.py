"""
Query the live provider from the terminal.

This script:
1) Loads settings from the environment / .env (OMDB_API_KEY required)
2) Builds the movie service
3) Runs either a recommendation (--favorite) or a top-by-genre query (--genre)
4) Prints the ranked titles

Usage:
    python -m scripts.recommend --favorite "Inception"
    python -m scripts.recommend --genre Action

Expect many sequential provider calls; a recommendation can take a while.
"""

import argparse  # command-line flags
import time  # measure step timings
from typing import List, Optional

from loguru import logger  # console logging

from movie_aggregator.config import Settings  # environment-backed settings
from movie_aggregator.exceptions import AppError  # lookup failures
from movie_aggregator.models import DetailRecord  # result rows
from movie_aggregator.service import MovieService  # aggregation facade


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Movie aggregator command-line client")
	group = parser.add_mutually_exclusive_group(required=True)
	group.add_argument("--favorite", help="favorite movie title to recommend from")
	group.add_argument("--genre", help="genre to list the best-rated movies of")
	return parser


def format_row(i: int, m: DetailRecord) -> str:
	return f"{i:2d}. [{m.imdb_rating or '-'}] {m.title} ({m.year}) - {m.genre}"


def main(argv: Optional[List[str]] = None, service: Optional[MovieService] = None) -> int:
	args = build_parser().parse_args(argv)

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Movie Aggregator")
	logger.info("=" * 60)

	if service is None:
		service = MovieService(Settings.from_env())

	t0 = time.time()  # start timer
	try:
		if args.favorite:
			rec = service.recommend(args.favorite)
			logger.info(f"Recommendations for '{rec.seed.title}' ({rec.seed.imdb_id}):")
			rows = rec.items
		else:
			rows = service.top_by_genre(args.genre).movies
			logger.info(f"Top {args.genre} movies:")
	except AppError as e:
		logger.error(f"[FAIL] {e.detail}")
		return 1

	for i, m in enumerate(rows, 1):
		logger.info(format_row(i, m))
	logger.info(f"[OK] {len(rows)} titles in {time.time() - t0:.2f}s")
	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	raise SystemExit(main())
