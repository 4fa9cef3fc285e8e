"""
Response directory adapter.

Loads one custom response per Python module in a directory. The
response name is the file name without its extension, and the module
must define a callable of the same name:

    responses/insufficient_funds.py

        def insufficient_funds(context, error, extra=None):
            ...

Files whose names start with an underscore are ignored.
"""

import importlib.util
import logging
import sys
from pathlib import Path

from respkit.domain.responses.entities import ResponseImplementation
from respkit.domain.responses.errors import ResponseLoadError
from respkit.domain.responses.ports import ResponseSource

logger = logging.getLogger(__name__)

MODULE_PREFIX = "respkit_responses"


class DirectoryResponseSource(ResponseSource):
    """Discovers custom responses from a directory of Python modules.

    Args:
        directory: Directory to scan. None yields no responses.
    """

    is_built_in = False

    def __init__(self, directory: Path | None) -> None:
        self._directory = Path(directory) if directory is not None else None

    def load(self) -> list[tuple[str, ResponseImplementation]]:
        if self._directory is None:
            return []
        if not self._directory.is_dir():
            raise ResponseLoadError(str(self._directory), "not a directory")

        pairs = []
        for path in sorted(self._directory.glob("*.py")):
            if path.name.startswith("_"):
                continue
            pairs.append((path.stem, self._load_module(path)))

        logger.info(
            "Loaded %d custom responses from %s", len(pairs), self._directory
        )
        return pairs

    def _load_module(self, path: Path) -> ResponseImplementation:
        name = path.stem
        spec = importlib.util.spec_from_file_location(
            f"{MODULE_PREFIX}.{name}", path
        )
        if spec is None or spec.loader is None:
            raise ResponseLoadError(str(path), "not an importable module")

        module = importlib.util.module_from_spec(spec)
        sys.modules[spec.name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            del sys.modules[spec.name]
            raise ResponseLoadError(
                str(path), f"{type(exc).__name__}: {exc}"
            ) from exc

        implementation = getattr(module, name, None)
        if implementation is None:
            raise ResponseLoadError(str(path), f"module defines no '{name}'")
        if not callable(implementation):
            raise ResponseLoadError(str(path), f"'{name}' is not callable")
        return implementation
