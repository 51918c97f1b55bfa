# lenslink/schema/serialization.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict

from lenslink.schema.types import ConnectorPair, Scene
from lenslink.utils.io import read_json, read_yaml, write_json, write_yaml

_YAML_EXT = {".yaml", ".yml"}

def load_scene(path: str | Path) -> Scene:
    """Read a scene from YAML or JSON (picked by extension). A relative image path is resolved against the scene file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"scene not found: {p}")
    raw = read_yaml(p) if p.suffix.lower() in _YAML_EXT else read_json(p)
    scene = Scene.model_validate(raw or {})
    if scene.image and not Path(scene.image).is_absolute():
        scene = scene.model_copy(update={"image": str((p.parent / scene.image).resolve())})
    return scene

def save_scene(scene: Scene, path: str | Path) -> str:
    p = Path(path)
    obj = scene.model_dump(exclude_none=True)
    if p.suffix.lower() in _YAML_EXT:
        write_yaml(obj, p)
    else:
        write_json(obj, p)
    return str(p)

def connectors_to_dict(pair: ConnectorPair) -> Dict[str, Any]:
    return {"segments": [seg.model_dump() for seg in pair]}

def write_connectors_json(pair: ConnectorPair, path: str | Path) -> str:
    write_json(connectors_to_dict(pair), path)
    return str(path)
