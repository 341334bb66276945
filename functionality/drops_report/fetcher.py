from __future__ import annotations

"""Data fetching helpers for the drops report.

DropsFetcher performs the single API request of a run and turns the response
into Game records, mapping every failure onto FetchError.
"""

import asyncio
import json
import sys

import aiohttp

from .drops_api import DROPS_API_URL, fetch_drops_payload
from .models import Game, games_from_payload


class FetchError(RuntimeError):
	"""Raised when the drop campaigns cannot be retrieved."""


class NetworkError(FetchError):
	"""Transport failure: connection error, non-2xx status or timeout."""


class DecodeError(FetchError):
	"""The response is not JSON or does not match the expected schema."""


class DropsFetcher:
	"""Fetches drop campaigns from the API, one request per call."""

	def __init__(self, url: str = DROPS_API_URL, *, timeout_seconds: float = 30) -> None:
		self.url = url
		self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

	async def fetch_games(self) -> list[Game]:
		"""Return every game listed by the API, in response order."""
		print("fetching open drop campaigns...", file=sys.stderr)
		try:
			async with aiohttp.ClientSession(timeout=self.timeout) as session:
				data = await fetch_drops_payload(session, self.url)
		except (json.JSONDecodeError, UnicodeDecodeError) as exc:
			raise DecodeError(f"failed to parse json response: {exc}") from exc
		except asyncio.TimeoutError as exc:
			raise NetworkError(f"request to {self.url} timed out") from exc
		except aiohttp.ClientError as exc:
			raise NetworkError(f"failed to fetch from api: {exc}") from exc
		try:
			return games_from_payload(data)
		except (TypeError, ValueError) as exc:
			raise DecodeError(f"unexpected response schema: {exc}") from exc
