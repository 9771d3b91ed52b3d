"""Read-only listing of the sample PlantUML diagrams."""
from __future__ import annotations

import logging
from pathlib import Path

from src.shared.constants import FIXTURE_EXTENSION
from src.shared.errors import FixtureError, NotFoundError
from src.shared.models.common import Fixture

logger = logging.getLogger(__name__)


def format_label(file_name: str) -> str:
    """Human label for a fixture file.

    "uc01-online-shop.plant" -> "UC01 Online Shop", "basic.plant" -> "BASIC"
    """
    stem = file_name[: -len(FIXTURE_EXTENSION)] if file_name.endswith(FIXTURE_EXTENSION) else file_name
    raw_id, *rest = stem.split("-")
    title = " ".join(segment[:1].upper() + segment[1:] for segment in rest if segment)
    return f"{raw_id.upper()} {title}" if title else raw_id.upper()


class FixtureProvider:
    """Lists ``*.plant`` files from a fixed directory, sorted by file name."""

    def __init__(self, fixtures_dir: str | Path) -> None:
        self._dir = Path(fixtures_dir)

    @property
    def directory(self) -> Path:
        return self._dir

    def available(self) -> bool:
        return self._dir.is_dir()

    def list_fixtures(self) -> list[Fixture]:
        """Return every fixture with its content.

        Raises:
            FixtureError: If the directory or a file cannot be read.
        """
        try:
            files = sorted(
                path for path in self._dir.iterdir()
                if path.is_file() and path.name.endswith(FIXTURE_EXTENSION)
            )
            return [self._load(path) for path in files]
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read PlantUML fixtures from %s: %s", self._dir, exc)
            raise FixtureError() from exc

    def get_fixture(self, fixture_id: str) -> Fixture:
        """Return one fixture by id (file name without extension).

        Raises:
            NotFoundError: If no fixture has that id.
        """
        for fixture in self.list_fixtures():
            if fixture.id == fixture_id:
                return fixture
        raise NotFoundError(f"Fixture not found: {fixture_id}")

    def _load(self, path: Path) -> Fixture:
        return Fixture(
            id=path.name[: -len(FIXTURE_EXTENSION)],
            file_name=path.name,
            label=format_label(path.name),
            content=path.read_text(encoding="utf-8"),
        )
