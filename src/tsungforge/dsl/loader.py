"""Loading scenario documents from Python files."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

from tsungforge._internal.errors import ScenarioError
from tsungforge._internal.logging import get_logger
from tsungforge.model.document import ScenarioDocument

logger = get_logger("dsl.loader")


def load_document(file_path: str | Path) -> ScenarioDocument:
    """Import a scenario file and return the document it builds.

    The file is executed as a module; the first module-level
    ``ScenarioDocument`` (in definition order) is returned.

    Args:
        file_path: Path to the Python scenario file.

    Returns:
        The scenario document defined by the file.

    Raises:
        ScenarioError: If the file does not exist, is not a ``.py`` file,
            fails to import, or defines no ``ScenarioDocument``.
    """
    path = Path(file_path)

    if not path.exists():
        msg = f"Scenario file not found: {path}"
        raise ScenarioError(msg)

    if path.suffix != ".py":
        msg = f"Scenario file must be a .py file, got: {path}"
        raise ScenarioError(msg)

    module_name = f"tsungforge_scenario_{path.stem}"

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        msg = f"Could not create module spec for: {path}"
        raise ScenarioError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module

    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        msg = f"Failed to import scenario file {path}: {exc}"
        raise ScenarioError(msg) from exc
    finally:
        sys.modules.pop(module_name, None)

    documents = [obj for obj in vars(module).values() if isinstance(obj, ScenarioDocument)]
    if not documents:
        msg = f"No ScenarioDocument found in {path}. Assign one at module level."
        raise ScenarioError(msg)

    if len(documents) > 1:
        logger.warning("%s defines %d documents; using the first", path, len(documents))
    logger.debug("Loaded %r from %s", documents[0], path)
    return documents[0]
