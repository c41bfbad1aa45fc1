"""
Application errors.
Each error carries the HTTP status it maps to; the API layer renders them as {"error": detail}.
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
	status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
	detail: str = "An unexpected error occurred"

	def __init__(self, detail: Optional[str] = None):
		if detail:
			self.detail = detail
		super().__init__(self.detail)


class ClientInputError(AppError):
	"""Missing or malformed request parameter."""
	status_code = status.HTTP_400_BAD_REQUEST
	detail = "invalid request"


class UpstreamNotFoundError(AppError):
	"""The provider had no match, or could not be reached."""
	status_code = status.HTTP_404_NOT_FOUND
	detail = "not found"


class MovieNotFoundError(UpstreamNotFoundError):
	detail = "movie not found"


class EpisodeNotFoundError(UpstreamNotFoundError):
	detail = "episode not found"


class TitleNotFoundError(UpstreamNotFoundError):
	def __init__(self, title: str):
		self.title = title
		super().__init__("favorite movie not found")


class StartupConfigError(RuntimeError):
	"""Raised while loading settings; the process must not start."""
