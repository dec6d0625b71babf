"""Resolve ``"package.module:attribute"`` targets to registries."""

import importlib
import logging
import sys
from pathlib import Path
from typing import Any

from .errors import SchemaLoadError
from .registry import Registry
from .schema import Schema

logger = logging.getLogger(__name__)


def load_registry(target: str, search_path: Path | None = None) -> Registry:
    """Import ``target`` and return the registry it names.

    The attribute may be a Schema subclass, a Registry, or a callable
    taking no arguments that returns one of those.

    Args:
        target: ``"package.module:attribute"``; the attribute may be dotted
        search_path: Directory importable while the target is resolved;
            it is removed from ``sys.path`` afterwards

    Raises:
        SchemaLoadError: If the module or attribute cannot be resolved, or
            importing the module or calling the factory raises
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise SchemaLoadError(target, "expected 'package.module:attribute'")

    location = None
    if search_path is not None:
        location = str(Path(search_path).resolve())
        if location in sys.path:
            location = None
        else:
            sys.path.insert(0, location)

    try:
        registry = _resolve_target(target, module_name, attr_path)
    finally:
        if location is not None and location in sys.path:
            sys.path.remove(location)

    logger.debug(f"Loaded {registry!r} from {target}")
    return registry


def _resolve_target(target: str, module_name: str, attr_path: str) -> Registry:
    logger.debug(f"Importing schema module {module_name}")
    try:
        obj: Any = importlib.import_module(module_name)
    except Exception as e:
        raise SchemaLoadError(target, f"import failed: {type(e).__name__}: {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise SchemaLoadError(target, f"no attribute '{attr_path}'") from None

    registry = _as_registry(obj)
    if registry is None and callable(obj) and not isinstance(obj, type):
        try:
            produced = obj()
        except Exception as e:
            raise SchemaLoadError(target, f"{attr_path}() raised {type(e).__name__}: {e}") from e
        registry = _as_registry(produced)
    if registry is None:
        raise SchemaLoadError(target, f"{type(obj).__name__} is not a Schema or Registry")
    return registry


def _as_registry(obj: Any) -> Registry | None:
    if isinstance(obj, Registry):
        return obj
    if isinstance(obj, type) and issubclass(obj, Schema):
        return obj.registry
    return None
