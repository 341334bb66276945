from .models import Game, Drop, Reward, games_from_payload
from .fetcher import DropsFetcher, FetchError, NetworkError, DecodeError
from .report import (
	RECENT_WINDOW_DAYS,
	ends_in_phrase,
	escape_markdown,
	group_recent_drops,
	render_report,
	sort_games,
)
from .writer import ReportWriter, WriteError
from .config import ReportConfig, load_config

__all__ = [
	"Game",
	"Drop",
	"Reward",
	"games_from_payload",
	"DropsFetcher",
	"FetchError",
	"NetworkError",
	"DecodeError",
	"RECENT_WINDOW_DAYS",
	"ends_in_phrase",
	"escape_markdown",
	"group_recent_drops",
	"render_report",
	"sort_games",
	"ReportWriter",
	"WriteError",
	"ReportConfig",
	"load_config",
]
