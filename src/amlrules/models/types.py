from enum import Enum

class AmlTypes(str, Enum):
    LEAR = "LEAR"
    FOREIGN = "FOREIGN"

class CorpTypeCd(str, Enum):
    BC_COMPANY = "BC"
    BC_CCC = "CC"
    BC_ULC_COMPANY = "ULC"
    BENEFIT_COMPANY = "BEN"
    COOP = "CP"
    EXTRA_PRO_A = "A"

class AmlStatuses(str, Enum):
    OK = "OK"
    ERROR_CCC_MISMATCH = "ERROR_CCC_MISMATCH"
    ERROR_FOREIGN = "ERROR_FOREIGN"
    ERROR_FOREIGN_UNLIMITED = "ERROR_FOREIGN_UNLIMITED"
    ERROR_FUTURE_EFFECTIVE_FILING = "ERROR_FUTURE_EFFECTIVE_FILING"
    ERROR_LIMITED_RESTORATION = "ERROR_LIMITED_RESTORATION"
    ERROR_NOT_AFFILIATED = "ERROR_NOT_AFFILIATED"
    ERROR_NOT_IN_GOOD_STANDING = "ERROR_NOT_IN_GOOD_STANDING"
    ERROR_ULC_MISMATCH = "ERROR_ULC_MISMATCH"
