"""HTTP client for the public Twitch drops API.

The API returns every currently listed drop campaign, grouped by game, in a
single JSON array. No authentication is required.
"""

from typing import Any

import aiohttp


DROPS_API_URL = "https://twitch-drops-api.sunkwi.com/drops"


async def fetch_drops_payload(session: aiohttp.ClientSession, url: str = DROPS_API_URL) -> Any:
	"""GET the drops endpoint and return the decoded JSON body.

	Raises aiohttp.ClientResponseError on a non-2xx status and
	json.JSONDecodeError when the body is not JSON.
	"""
	async with session.get(url, headers={"Accept": "application/json"}) as resp:
		resp.raise_for_status()
		# The API does not always label its body as application/json
		return await resp.json(content_type=None)
