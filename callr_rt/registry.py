
"""Application discovery utilities."""

from __future__ import annotations

import importlib
import json
import warnings
from pathlib import Path
from typing import Dict

from callr_rt.apps.base import CallApplication


def _validate_app(module: object, manifest: dict, directory: str) -> CallApplication:
    if manifest.get("id") != directory:
        raise ValueError("manifest id does not match its directory")
    handler = getattr(module, "handle", None)
    if not callable(handler):
        raise TypeError("missing required callable: handle")
    return handler


def load_apps() -> Dict[str, CallApplication]:
    apps: Dict[str, CallApplication] = {}
    apps_dir = Path(__file__).resolve().parent / "apps"

    for manifest_path in sorted(apps_dir.glob("*/app.json")):
        try:
            manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
            directory = manifest_path.parent.name
            module = importlib.import_module(f"callr_rt.apps.{directory}.app")
            apps[manifest["id"]] = _validate_app(module, manifest, directory)
        except Exception as exc:
            warnings.warn(
                f"Skipping application at {manifest_path}: {exc}",
                RuntimeWarning,
                stacklevel=2,
            )

    return apps


def resolve_app(ref: str) -> CallApplication:
    """Return a bundled application by id, or import one given as `module:attribute`."""
    if ":" not in ref:
        apps = load_apps()
        if ref not in apps:
            raise LookupError(f"Application '{ref}' is not registered")
        return apps[ref]

    module_name, _, attribute = ref.partition(":")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attribute)
    except AttributeError as exc:
        raise LookupError(f"Module '{module_name}' has no attribute '{attribute}'") from exc
