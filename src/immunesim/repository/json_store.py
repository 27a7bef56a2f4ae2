"""JSON-based repository for battle scenarios."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter

from immunesim.schemas import ScenarioCreate

logger = logging.getLogger(__name__)

SUFFIX = ".json"


class JsonScenarioRepository:
    """Read and write scenarios as JSON files in one directory."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self._adapter: TypeAdapter[ScenarioCreate] = TypeAdapter(ScenarioCreate)

    def _path_for(self, slug: str) -> Path:
        return self.base_path / f"{slug}{SUFFIX}"

    def resolve(self, name: str | Path) -> Path:
        """Map a slug or a file path onto the scenario file it names."""

        candidate = Path(name)
        if candidate.suffix == SUFFIX and candidate.exists():
            return candidate
        return self._path_for(str(name))

    def load(self, name: str | Path) -> ScenarioCreate:
        """Load and validate a scenario by slug or path.

        Raises ``FileNotFoundError`` for unknown scenarios and
        ``pydantic.ValidationError`` for malformed ones.
        """

        path = self.resolve(name)
        if not path.exists():
            raise FileNotFoundError(f"scenario not found: {path}")
        logger.debug("loading scenario from %s", path)
        return self._adapter.validate_json(path.read_bytes())

    def save(self, slug: str, scenario: ScenarioCreate) -> Path:
        """Serialize a scenario to disk and return its path."""

        self.base_path.mkdir(parents=True, exist_ok=True)
        path = self._path_for(slug)
        path.write_bytes(self._adapter.dump_json(scenario, indent=2))
        return path

    def list_scenarios(self) -> list[str]:
        """Return the slugs of every scenario in the directory."""

        if not self.base_path.is_dir():
            logger.warning("scenario directory %s does not exist", self.base_path)
            return []
        return sorted(path.stem for path in self.base_path.glob(f"*{SUFFIX}"))

    def delete(self, slug: str) -> None:
        """Remove a scenario file if it exists."""

        path = self._path_for(slug)
        if path.exists():
            path.unlink()
