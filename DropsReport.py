"""DropsReport: one-shot Twitch Drops report generator.

Fetches the active drop campaigns once, renders them into a Markdown report
and replaces the output file. Configuration is provided via environment
variables loaded from .env when present.
"""

import asyncio
import sys
from datetime import datetime, timezone

from dotenv import load_dotenv

from functionality.drops_report import (
	DropsFetcher,
	FetchError,
	ReportWriter,
	WriteError,
	load_config,
	render_report,
)


async def run() -> int:
	"""Fetch, render and write the report; return the process exit status."""
	try:
		config = load_config()
	except RuntimeError as exc:
		print(f"invalid configuration: {exc}", file=sys.stderr)
		return 1
	fetcher = DropsFetcher(config.api_url, timeout_seconds=config.timeout_seconds)
	try:
		games = await fetcher.fetch_games()
	except FetchError as exc:
		print(f"failed to fetch drop campaigns: {exc}", file=sys.stderr)
		return 1

	document = render_report(games, datetime.now(timezone.utc))
	try:
		ReportWriter(config.report_path).write(document)
	except WriteError as exc:
		print(f"failed to write report: {exc}", file=sys.stderr)
		return 1

	print(f"Wrote {len(games)} games to {config.report_path}")
	return 0


def main() -> int:
	load_dotenv()
	return asyncio.run(run())


if __name__ == "__main__":
	sys.exit(main())
