from __future__ import annotations

from typing import Callable, Dict, List

from amlrules.models.business import AmalgamatingBusiness
from amlrules.models.types import AmlTypes, CorpTypeCd

Roster = List[AmalgamatingBusiness]


def _exists(roster: Roster, predicate: Callable[[AmalgamatingBusiness], bool]) -> bool:
    return any(predicate(b) for b in roster)


def _is_lear_of(legal_type: CorpTypeCd) -> Callable[[AmalgamatingBusiness], bool]:
    def predicate(b: AmalgamatingBusiness) -> bool:
        return b.type == AmlTypes.LEAR and b.legal_type == legal_type

    return predicate


def is_any_foreign(roster: Roster) -> bool:
    """True if there is a foreign company in the table."""
    return _exists(roster, lambda b: b.type == AmlTypes.FOREIGN)


def is_any_ccc(roster: Roster) -> bool:
    """True if there is a CCC in the table."""
    return _exists(roster, _is_lear_of(CorpTypeCd.BC_CCC))


def is_any_limited(roster: Roster) -> bool:
    """True if there is a limited (BC) company in the table."""
    return _exists(roster, _is_lear_of(CorpTypeCd.BC_COMPANY))


def is_any_unlimited(roster: Roster) -> bool:
    """True if there is an unlimited company in the table."""
    return _exists(roster, _is_lear_of(CorpTypeCd.BC_ULC_COMPANY))


def roster_summary(roster: Roster) -> Dict[str, bool]:
    return {
        "any_foreign": is_any_foreign(roster),
        "any_ccc": is_any_ccc(roster),
        "any_limited": is_any_limited(roster),
        "any_unlimited": is_any_unlimited(roster),
    }
