from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from amlrules.models.business import AmalgamatingBusiness, EvaluationContext

DEFAULT_CONFIG = str(Path(__file__).with_name("filing.yaml"))

def _staff_override() -> bool:
    # Staff tooling can force the staff flag without editing the snapshot.
    return os.getenv("AMLRULES_STAFF", "").strip() in ("1", "true", "yes")

def _mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{where} must be a mapping, got {type(value).__name__}")
    return value

def parse_snapshot(cfg: Dict[str, Any]) -> Tuple[EvaluationContext, Optional[AmalgamatingBusiness]]:
    cfg = _mapping(cfg, "snapshot")
    businesses = cfg["businesses"] or []

    flags = dict(_mapping(cfg.get("context") or {}, "context"))
    # The roster only comes from `businesses`.
    if "amalgamating_businesses" in flags:
        raise TypeError("context must not contain amalgamating_businesses")
    if _staff_override():
        flags["is_role_staff"] = True

    ctx = EvaluationContext(**flags, amalgamating_businesses=businesses)

    candidate = cfg.get("candidate")
    if not candidate:
        return ctx, None
    return ctx, AmalgamatingBusiness(**_mapping(candidate, "candidate"))

def load_snapshot(config_path: str = DEFAULT_CONFIG) -> Tuple[EvaluationContext, Optional[AmalgamatingBusiness]]:
    cfg = yaml.safe_load(Path(config_path).read_text()) or {}
    return parse_snapshot(cfg)
