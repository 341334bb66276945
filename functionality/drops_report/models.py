from __future__ import annotations

"""Data models used by the drops report.

Frozen dataclasses mirroring the drops API payload. Each model knows how to
build itself from the camelCase wire format and rejects payloads that do not
match the expected schema.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

MAX_MINUTES_REQUIRED = 0xFFFF


def _parse_utc(value: str, field: str) -> datetime:
	"""Parse an ISO 8601 string into an aware UTC datetime.

	Strings without an offset are taken as UTC.
	"""
	s = value.replace("Z", "+00:00")
	try:
		dt = datetime.fromisoformat(s)
	except ValueError as exc:
		raise ValueError(f"{field}: invalid timestamp {value!r}") from exc
	if dt.tzinfo is None:
		return dt.replace(tzinfo=timezone.utc)
	try:
		return dt.astimezone(timezone.utc)
	except OverflowError as exc:
		raise ValueError(f"{field}: timestamp {value!r} out of range") from exc


def _require(obj: Any, key: str, kind: type) -> Any:
	if not isinstance(obj, dict):
		raise TypeError(f"expected object holding {key!r}, got {type(obj).__name__}")
	if key not in obj:
		raise ValueError(f"missing field {key!r}")
	value = obj[key]
	# bool is an int subclass; the API never sends one for a number
	if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
		raise TypeError(f"{key}: expected {kind.__name__}, got {type(value).__name__}")
	return value


@dataclass(frozen=True)
class Reward:
	"""A reward unlocked after watching for minutes_required minutes."""
	name: str
	minutes_required: int

	@classmethod
	def from_payload(cls, obj: Any) -> "Reward":
		minutes = _require(obj, "requiredMinutesWatched", int)
		if not 0 <= minutes <= MAX_MINUTES_REQUIRED:
			raise ValueError(f"requiredMinutesWatched: {minutes} out of range")
		return cls(name=_require(obj, "name", str), minutes_required=minutes)


@dataclass(frozen=True)
class Drop:
	"""A single drop campaign of a game."""
	name: str
	start_at: datetime
	end_at: datetime
	rewards: tuple[Reward, ...]

	@classmethod
	def from_payload(cls, obj: Any) -> "Drop":
		return cls(
			name=_require(obj, "name", str),
			start_at=_parse_utc(_require(obj, "startAt", str), "startAt"),
			end_at=_parse_utc(_require(obj, "endAt", str), "endAt"),
			rewards=tuple(Reward.from_payload(r) for r in _require(obj, "timeBasedDrops", list)),
		)


@dataclass(frozen=True)
class Game:
	"""A game and its active drop campaigns.

	The API calls the campaigns "rewards"; here they are drops.
	"""
	display_name: str
	drops: tuple[Drop, ...]

	@classmethod
	def from_payload(cls, obj: Any) -> "Game":
		return cls(
			display_name=_require(obj, "gameDisplayName", str),
			drops=tuple(Drop.from_payload(d) for d in _require(obj, "rewards", list)),
		)


def games_from_payload(data: Any) -> list[Game]:
	"""Build the game list from a decoded API response (a JSON array)."""
	if not isinstance(data, list):
		raise TypeError(f"expected a JSON array of games, got {type(data).__name__}")
	return [Game.from_payload(g) for g in data]
