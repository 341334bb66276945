from __future__ import annotations

"""Markdown rendering for the drops report.

Builds the two report views from a list of games: drops that started in the
last RECENT_WINDOW_DAYS days, grouped by start date and game, and the full
catalog of drops per game with their rewards.
"""

from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Iterable

from .models import Drop, Game

RECENT_WINDOW_DAYS = 7
REPORT_TITLE = "# Twitch Drops Campaigns"
RECENT_HEADING = "## Recent Drops"
ALL_HEADING = "## All drops"
NO_CAMPAIGNS_LINE = "No active drops campaigns found."

_MARKDOWN_SPECIAL = frozenset("\\`*_{}[]()#+-.!|<>~")


def escape_markdown(text: str) -> str:
	"""Backslash-escape Markdown punctuation so names cannot alter structure."""
	return "".join(f"\\{c}" if c in _MARKDOWN_SPECIAL else c for c in text)


def ends_in_phrase(end_at: datetime, now: datetime) -> str:
	"""Describe how many whole days remain until end_at."""
	days = (end_at - now) // timedelta(days=1)
	if days < 0:
		return "already ended"
	if days == 0:
		return "ends today"
	if days == 1:
		return "ends tomorrow"
	return f"ends in {days} days"


def sort_games(games: Iterable[Game]) -> list[Game]:
	"""Order games by display name, ignoring case; ties keep input order."""
	return sorted(games, key=lambda g: g.display_name.lower())


def group_recent_drops(
	games: Iterable[Game],
	now: datetime,
	*,
	window_days: int = RECENT_WINDOW_DAYS,
) -> list[tuple[date, list[tuple[str, list[Drop]]]]]:
	"""Bucket drops started after now - window_days by UTC start date, then game.

	Dates come newest first and game names in ascending order; drops keep the
	order in which they were encountered.
	"""
	cutoff = now - timedelta(days=window_days)
	buckets: dict[date, dict[str, list[Drop]]] = defaultdict(lambda: defaultdict(list))
	for game in games:
		for drop in game.drops:
			if drop.start_at > cutoff:
				buckets[drop.start_at.date()][game.display_name].append(drop)
	return [
		(day, sorted(by_game.items()))
		for day, by_game in sorted(buckets.items(), reverse=True)
	]


def render_recent_section(games: list[Game], now: datetime) -> str:
	lines = [RECENT_HEADING, ""]
	grouped = group_recent_drops(games, now)
	if not grouped:
		lines += [f"No drop campaigns started in the last {RECENT_WINDOW_DAYS} days.", ""]
	for day, by_game in grouped:
		lines.append(day.strftime("%Y-%m-%d"))
		for name, drops in by_game:
			lines.append(f"- {escape_markdown(name)}")
			for drop in drops:
				lines.append(f"  - {escape_markdown(drop.name)} ({ends_in_phrase(drop.end_at, now)})")
		lines.append("")
	return "\n".join(lines) + "\n"


def render_all_section(games: list[Game], now: datetime) -> str:
	lines = [ALL_HEADING, ""]
	for game in games:
		lines.append(escape_markdown(game.display_name))
		for drop in game.drops:
			lines.append(f"- {escape_markdown(drop.name)} ({ends_in_phrase(drop.end_at, now)})")
			for reward in drop.rewards:
				lines.append(
					f"  - {escape_markdown(reward.name)} ({reward.minutes_required} minutes watched)"
				)
		lines.append("")
	return "\n".join(lines) + "\n"


def render_report(games: Iterable[Game], now: datetime) -> str:
	"""Render the complete Markdown document for the given games.

	Games are sorted here, so callers may pass them in API order. With no
	games the document holds only the title and a one-line notice.
	"""
	ordered = sort_games(games)
	header = f"{REPORT_TITLE}\n\n"
	if not ordered:
		return f"{header}{NO_CAMPAIGNS_LINE}\n"
	return header + render_recent_section(ordered, now) + render_all_section(ordered, now)
