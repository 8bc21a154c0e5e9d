from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from amlrules.models.types import AmlTypes, CorpTypeCd

class AmalgamatingBusiness(BaseModel):
    type: AmlTypes
    legal_type: Optional[CorpTypeCd] = None  # only meaningful for LEAR
    address: Optional[Dict[str, Any]] = None  # missing = not affiliated
    is_not_in_good_standing: bool = False
    is_limited_restoration: bool = False
    is_future_effective: bool = False
    identifier: Optional[str] = None
    name: Optional[str] = None

class EvaluationContext(BaseModel):
    is_role_staff: bool = False
    is_type_bc_ccc: bool = False
    is_type_bc_ulc_company: bool = False
    amalgamating_businesses: List[AmalgamatingBusiness] = []
