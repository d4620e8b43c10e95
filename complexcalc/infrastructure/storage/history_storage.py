from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from supabase import Client

from complexcalc.application.use_cases.calculator_session import CalculatorSession
from complexcalc.domain.errors import HistoryIOError

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.-]+")


class HistoryStorage:
    """Storage for named history documents: Supabase Storage with a local directory fallback."""

    def __init__(self, client: Client | None) -> None:
        self.client = client
        self.bucket = os.getenv("CALC_HISTORY_BUCKET", "histories")
        self.disabled = os.getenv("SUPABASE_DISABLED", "0") == "1"
        self.local_dir = Path(os.getenv("CALC_HISTORY_LOCAL_DIR", ".local_history"))
        if self.disabled or self.client is None:
            self.local_dir.mkdir(parents=True, exist_ok=True)

    @property
    def is_local(self) -> bool:
        return self.disabled or self.client is None

    @staticmethod
    def _check_name(name: str) -> str:
        if not _NAME_PATTERN.fullmatch(name) or set(name) == {"."}:
            raise ValueError(f"Invalid history document name: {name!r}")
        return name

    def location(self, name: str) -> str:
        name = self._check_name(name)
        if self.is_local:
            return str(self.local_dir / name)
        return f"{self.bucket}/{name}"

    def save(self, session: CalculatorSession, name: str) -> str:
        path = self.location(name)
        if self.is_local:
            session.save_history(path)
            return path
        data = session.export_history().encode("utf-8")
        try:  # pragma: no cover - network
            self.client.storage.from_(self.bucket).upload(
                path=name,
                file=data,
                file_options={"content-type": "text/plain; charset=utf-8", "upsert": "true"},
            )
        except Exception as exc:  # pragma: no cover
            raise HistoryIOError("Storage upload failed", path) from exc
        logger.info("Uploaded history document %s", path)
        return path

    def load(self, session: CalculatorSession, name: str) -> str:
        path = self.location(name)
        if self.is_local:
            session.load_history(path)
            return path
        try:  # pragma: no cover - network
            data = self.client.storage.from_(self.bucket).download(name)
            text = data.decode("utf-8")
        except Exception as exc:  # pragma: no cover
            raise HistoryIOError("Storage download failed", path) from exc
        session.import_history(text)
        return path
