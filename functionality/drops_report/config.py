from __future__ import annotations

"""Runtime settings for the drops report.

Values come from environment variables, optionally loaded from a .env file
by the entrypoint. Unset or empty variables fall back to the defaults.
"""

import os
from dataclasses import dataclass

from .drops_api import DROPS_API_URL
from .writer import DEFAULT_REPORT_PATH

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class ReportConfig:
	api_url: str = DROPS_API_URL
	report_path: str = DEFAULT_REPORT_PATH
	timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def load_config() -> ReportConfig:
	"""Read DROPS_API_URL, DROPS_REPORT_PATH and DROPS_REQUEST_TIMEOUT."""
	raw_timeout = os.getenv("DROPS_REQUEST_TIMEOUT", "").strip()
	timeout = DEFAULT_TIMEOUT_SECONDS
	if raw_timeout:
		try:
			timeout = float(raw_timeout)
		except ValueError:
			raise RuntimeError(f"Invalid DROPS_REQUEST_TIMEOUT: {raw_timeout!r}")
		if timeout <= 0:
			raise RuntimeError(f"DROPS_REQUEST_TIMEOUT must be positive, got {raw_timeout!r}")
	return ReportConfig(
		api_url=os.getenv("DROPS_API_URL", "").strip() or DROPS_API_URL,
		report_path=os.getenv("DROPS_REPORT_PATH", "").strip() or DEFAULT_REPORT_PATH,
		timeout_seconds=timeout,
	)
