"""Request/response models and client for the disk and service account control API."""

__version__ = "0.1.0"

from .base import Model, Tabular, Validatable
from .client import Client, DiskClient, ServiceAccountClient, get_client
from .const import (
    DISK_MAX_SIZE,
    MAX_NAME_LENGTH,
    MIN_NAME_LENGTH,
    DiskMetricsTimeRange,
)
from .disk import (
    Disk,
    DiskCreate,
    DiskDelete,
    DiskGet,
    DiskItem,
    DiskList,
    DiskListResult,
    DiskMetrics,
    DiskMetricsLine,
    DiskMetricsResult,
    DiskUpdate,
)
from .errors import APIError, InvalidNameError, ValidationFailed
from .service_account import (
    ServiceAccount,
    ServiceAccountCreate,
    ServiceAccountCreateKey,
    ServiceAccountDelete,
    ServiceAccountDeleteKey,
    ServiceAccountGet,
    ServiceAccountGetResult,
    ServiceAccountKey,
    ServiceAccountList,
    ServiceAccountListItem,
    ServiceAccountListResult,
    ServiceAccountUpdate,
)
from .types import ID, Empty, Status, age

__all__ = [
    "APIError",
    "Client",
    "DISK_MAX_SIZE",
    "Disk",
    "DiskClient",
    "DiskCreate",
    "DiskDelete",
    "DiskGet",
    "DiskItem",
    "DiskList",
    "DiskListResult",
    "DiskMetrics",
    "DiskMetricsLine",
    "DiskMetricsResult",
    "DiskMetricsTimeRange",
    "DiskUpdate",
    "Empty",
    "ID",
    "InvalidNameError",
    "MAX_NAME_LENGTH",
    "MIN_NAME_LENGTH",
    "Model",
    "ServiceAccount",
    "ServiceAccountClient",
    "ServiceAccountCreate",
    "ServiceAccountCreateKey",
    "ServiceAccountDelete",
    "ServiceAccountDeleteKey",
    "ServiceAccountGet",
    "ServiceAccountGetResult",
    "ServiceAccountKey",
    "ServiceAccountList",
    "ServiceAccountListItem",
    "ServiceAccountListResult",
    "ServiceAccountUpdate",
    "Status",
    "Tabular",
    "Validatable",
    "ValidationFailed",
    "age",
    "get_client",
]
