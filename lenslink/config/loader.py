# lenslink/config/loader.py
from pydantic_settings import BaseSettings
from omegaconf import OmegaConf
from dotenv import load_dotenv
from pathlib import Path
import os, warnings

class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    CFG_PROFILE: str = ""
    EXPORTS_ROOT: str = "./exports"

# used when configs/ is not shipped next to the package (e.g. wheel installs)
DEFAULTS = {
    "logging": {"level": "INFO"},
    "paths": {"exports": "./exports"},
    "interact": {
        "drag":   {"decimals": 2},
        "resize": {"grow": 1.05, "shrink": 0.95, "decimals": 2},
    },
    "magnify": {"resample": "lanczos"},
    "render": {
        "source":    {"stroke": "#1f77b4", "stroke_width": 1.0},
        "lens":      {"stroke": "#1f77b4", "stroke_width": 1.0},
        "connector": {"stroke": "#1f77b4", "stroke_width": 1.0, "dasharray": ""},
    },
}

def _abs(root: Path, p: str) -> str:
    pth = Path(p)
    return str((pth if pth.is_absolute() else (root / pth)).resolve())

def _merge_yaml(cfg, path_obj):
    """Merge a YAML file into cfg; missing files leave cfg untouched."""
    p = Path(path_obj)
    if not p.exists():
        return cfg
    y = OmegaConf.load(p)
    if not OmegaConf.is_dict(y):
        warnings.warn(f"[loader] '{p}' is not a mapping; ignored.")
        return cfg
    return OmegaConf.merge(cfg, y)

def load_cfg(root: Path | None = None):
    load_dotenv()

    def _env_resolver(var, default=None):
        return os.environ.get(var, default)
    OmegaConf.register_new_resolver("env", _env_resolver, replace=True)

    root = Path(root) if root else Path(__file__).resolve().parents[2]

    conf = OmegaConf.create(DEFAULTS)
    conf = _merge_yaml(conf, root / "configs" / "base.yaml")

    s = Settings()

    # ---- optional profile overlay ----
    profile = s.CFG_PROFILE
    if profile:
        prof_path = root / "configs" / "profiles" / f"{profile}.yaml"
        if not prof_path.exists():
            warnings.warn(f"[loader] profile '{profile}' not found at {prof_path}")
        conf = _merge_yaml(conf, prof_path)

    # env beats yaml for the log level
    if "LOG_LEVEL" in os.environ:
        conf.logging.level = s.LOG_LEVEL
    if "EXPORTS_ROOT" in os.environ:
        conf.paths.exports = s.EXPORTS_ROOT

    # ---- normalize paths.* ----
    paths_dict = OmegaConf.to_container(conf.paths, resolve=True)
    for k, v in list(paths_dict.items()):
        if isinstance(v, str):
            paths_dict[k] = _abs(root, v)
    conf.paths = OmegaConf.create(paths_dict)

    conf.env = dict(s)
    conf.root = str(root)
    return conf
