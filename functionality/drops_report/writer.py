from __future__ import annotations

"""File sink for the rendered drops report."""

import os

DEFAULT_REPORT_PATH = "DROPS.md"


class WriteError(RuntimeError):
	"""Raised when the report file cannot be created or replaced."""


class ReportWriter:
	"""Replaces the report file with a finished document in one step."""

	def __init__(self, path: str = DEFAULT_REPORT_PATH) -> None:
		"""Initialize the writer with a filesystem path."""
		self.path = path

	def _atomic_write(self, payload: str) -> None:
		"""Atomically write payload to the configured path."""
		dirname = os.path.dirname(self.path) or "."
		os.makedirs(dirname, exist_ok=True)
		tmp = f"{self.path}.tmp"
		try:
			with open(tmp, "w", encoding="utf-8", newline="\n") as f:
				f.write(payload)
			# os.replace is atomic on POSIX/Windows
			os.replace(tmp, self.path)
		except OSError:
			if os.path.exists(tmp):
				os.remove(tmp)
			raise

	def write(self, document: str) -> None:
		"""Write the document, leaving any previous report intact on failure."""
		try:
			self._atomic_write(document)
		except OSError as exc:
			raise WriteError(f"failed to persist {self.path}: {exc}") from exc
