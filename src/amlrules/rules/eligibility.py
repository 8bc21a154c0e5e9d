from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from amlrules.models.business import AmalgamatingBusiness, EvaluationContext
from amlrules.models.types import AmlStatuses, AmlTypes, CorpTypeCd
from amlrules.rules.aggregates import is_any_limited

Rule = Callable[[AmalgamatingBusiness, EvaluationContext], Optional[AmlStatuses]]


def not_affiliated(b: AmalgamatingBusiness, ctx: EvaluationContext) -> Optional[AmlStatuses]:
    """No address means the user isn't affiliated with the business (staff excepted)."""
    if b.type == AmlTypes.LEAR and not b.address and not ctx.is_role_staff:
        return AmlStatuses.ERROR_NOT_AFFILIATED
    return None


def not_in_good_standing(b: AmalgamatingBusiness, ctx: EvaluationContext) -> Optional[AmlStatuses]:
    if b.type == AmlTypes.LEAR and b.is_not_in_good_standing and not ctx.is_role_staff:
        return AmlStatuses.ERROR_NOT_IN_GOOD_STANDING
    return None


def limited_restoration(b: AmalgamatingBusiness, ctx: EvaluationContext) -> Optional[AmlStatuses]:
    if b.type == AmlTypes.LEAR and b.is_limited_restoration and not ctx.is_role_staff:
        return AmlStatuses.ERROR_LIMITED_RESTORATION
    return None


def future_effective_filing(b: AmalgamatingBusiness, ctx: EvaluationContext) -> Optional[AmlStatuses]:
    # Applies to staff too.
    if b.type == AmlTypes.LEAR and b.is_future_effective:
        return AmlStatuses.ERROR_FUTURE_EFFECTIVE_FILING
    return None


def foreign(b: AmalgamatingBusiness, ctx: EvaluationContext) -> Optional[AmlStatuses]:
    """
    Only staff may add a foreign business.
    A regular user can still meet one when resuming a draft staff started.
    """
    if b.type == AmlTypes.FOREIGN and not ctx.is_role_staff:
        return AmlStatuses.ERROR_FOREIGN
    return None


def foreign_ulc(b: AmalgamatingBusiness, ctx: EvaluationContext) -> Optional[AmlStatuses]:
    """Foreign into a ULC is not allowed if there is also a limited company."""
    if (
        b.type == AmlTypes.FOREIGN
        and ctx.is_type_bc_ulc_company
        and is_any_limited(ctx.amalgamating_businesses)
    ):
        return AmlStatuses.ERROR_FOREIGN_UNLIMITED
    return None


def ccc_mismatch(b: AmalgamatingBusiness, ctx: EvaluationContext) -> Optional[AmlStatuses]:
    if b.type == AmlTypes.LEAR and b.legal_type == CorpTypeCd.BC_CCC and not ctx.is_type_bc_ccc:
        return AmlStatuses.ERROR_CCC_MISMATCH
    return None


def ulc_mismatch(b: AmalgamatingBusiness, ctx: EvaluationContext) -> Optional[AmlStatuses]:
    if (
        b.type == AmlTypes.LEAR
        and b.legal_type == CorpTypeCd.BC_ULC_COMPANY
        and not ctx.is_type_bc_ulc_company
    ):
        return AmlStatuses.ERROR_ULC_MISMATCH
    return None


# TODO: cannot add a foreign ULC if there is a BC company and the target is ULC
# TODO: cannot add a BC company if there is a foreign ULC and the target is ULC

# Sorted by importance; the first hit wins.
RULES: List[Rule] = [
    not_affiliated,
    not_in_good_standing,
    limited_restoration,
    future_effective_filing,
    foreign,
    foreign_ulc,
    ccc_mismatch,
    ulc_mismatch,
]


def evaluate(b: AmalgamatingBusiness, ctx: EvaluationContext) -> AmlStatuses:
    for rule in RULES:
        status = rule(b, ctx)
        if status is not None:
            return status
    return AmlStatuses.OK


def evaluate_roster(ctx: EvaluationContext) -> List[Tuple[AmalgamatingBusiness, AmlStatuses]]:
    """Re-check every business already in the table, e.g. when a draft is resumed."""
    return [(b, evaluate(b, ctx)) for b in ctx.amalgamating_businesses]
