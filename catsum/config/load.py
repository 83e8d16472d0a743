"""Load YAML configs with project root resolution."""
from pathlib import Path

import yaml


def project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _resolve(cfg: dict, base: Path) -> None:
    """Resolve relative local paths under sources and outputs."""
    outputs = cfg.get("outputs")
    if isinstance(outputs, dict):
        for k, v in outputs.items():
            if isinstance(v, str) and not Path(v).is_absolute():
                outputs[k] = str(base / v)
    sources = cfg.get("sources")
    if isinstance(sources, dict):
        for spec in sources.values():
            if not isinstance(spec, dict):
                continue
            p = spec.get("path")
            if isinstance(p, str) and not Path(p).is_absolute():
                spec["path"] = str(base / p)


def get_sources(base_dir: Path | None = None) -> dict:
    """Dataset locations from config/sources.yaml: {"sources": {name: {url, path, timeout}}}."""
    base = base_dir or project_root()
    cfg = _read_yaml(base / "config" / "sources.yaml")
    _resolve(cfg, base)
    return cfg


def get_report_config(base_dir: Path | None = None) -> dict:
    """Report options from config/report.yaml (labels, top_n, titles, output dir)."""
    base = base_dir or project_root()
    cfg = _read_yaml(base / "config" / "report.yaml")
    _resolve(cfg, base)
    return cfg
