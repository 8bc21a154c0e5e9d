from __future__ import annotations

from typing import Dict, List, Tuple

from amlrules.config.loader import DEFAULT_CONFIG, load_snapshot
from amlrules.models.business import AmalgamatingBusiness
from amlrules.models.types import AmlStatuses
from amlrules.notify.slack import notify
from amlrules.rules.aggregates import roster_summary
from amlrules.rules.eligibility import evaluate, evaluate_roster


def _label(b: AmalgamatingBusiness) -> str:
    return b.identifier or b.name or f"<unnamed {b.type.value}>"


def run(config_path: str = DEFAULT_CONFIG, send_notification: bool = False) -> int:
    ctx, candidate = load_snapshot(config_path)

    results: List[Tuple[str, AmalgamatingBusiness, AmlStatuses]] = []

    # The candidate is checked against the table it would join.
    if candidate is not None:
        results.append(("candidate", candidate, evaluate(candidate, ctx)))

    for b, status in evaluate_roster(ctx):
        results.append(("table", b, status))

    violations = [(where, b, s) for where, b, s in results if s != AmlStatuses.OK]

    for where, b, status in results:
        print(f"{_label(b)} ({where}) {status.value}")

    print(f"checked={len(results)} violations={len(violations)}")

    if violations and send_notification:
        notify(
            f"amalgamation check: {len(violations)} violation(s) | "
            + ", ".join(f"{_label(b)}={s.value}" for _, b, s in violations)
        )

    return 1 if violations else 0


def summary(config_path: str = DEFAULT_CONFIG) -> Dict[str, bool]:
    ctx, _ = load_snapshot(config_path)
    out = roster_summary(ctx.amalgamating_businesses)
    for key, value in out.items():
        print(f"{key}: {str(value).lower()}")
    return out
