from .credentials import CredentialRecord, TokenSet
from .station import (
    NOT_AVAILABLE,
    CompactSummary,
    ComfortModuleSummary,
    DashboardPayload,
    OutdoorSummary,
    RainSummary,
)
