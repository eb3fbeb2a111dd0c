"""Loading documents and schema references for the command line."""

import importlib
import json
import logging
from pathlib import Path
from typing import Any

import hcl2

from .errors import DocumentLoadError

logger = logging.getLogger(__name__)

HCL_SUFFIXES = (".hcl", ".tf")


def load_document(path: Path) -> Any:
    """Load a JSON or HCL document."""
    path = Path(path)
    if not path.exists():
        raise DocumentLoadError(f"Document not found: {path}")

    logger.debug(f"Loading document: {path}")
    try:
        with open(path, "r") as f:
            if path.suffix == ".json":
                return json.load(f)
            if path.suffix in HCL_SUFFIXES:
                return hcl2.load(f)
    except Exception as e:
        raise DocumentLoadError(f"Error parsing {path.name}: {e}") from e
    raise DocumentLoadError(f"Unsupported document type '{path.suffix}' for {path.name}")


def load_schema(reference: str) -> Any:
    """Import a schema given as ``package.module:attribute``."""
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise DocumentLoadError(f"Invalid schema reference '{reference}', expected 'module:attribute'")

    logger.debug(f"Importing schema {attribute} from {module_name}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise DocumentLoadError(f"Failed to import schema module: {e}") from e

    schema = module
    for name in attribute.split("."):
        try:
            schema = getattr(schema, name)
        except AttributeError:
            raise DocumentLoadError(f"Schema '{attribute}' not found in module {module_name}")
    return schema
