"""Disk request and result models."""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import BeforeValidator, Field

from .base import Model, Tabular, Validatable, none_as_empty
from .const import (
    DISK_MAX_SIZE,
    MAX_NAME_LENGTH,
    MIN_NAME_LENGTH,
    NAME_PATTERN,
    NAME_PATTERN_STR,
    VALID_DISK_METRICS_TIME_RANGES,
)
from .errors import InvalidNameError, ValidationFailed
from .types import Empty, Status, age
from .validator import Validator, wrap_validate


TABLE_HEADER = ["NAME", "SIZE", "LOCATION", "AGE"]


def _enum_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _check_name_and_size(v: Validator, name: str, size: int) -> None:
    v.must(NAME_PATTERN.match(name) is not None, "name invalid " + NAME_PATTERN_STR)
    v.must(
        MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH,
        f"name must have length between {MIN_NAME_LENGTH}-{MAX_NAME_LENGTH} characters",
    )
    v.must(size >= 1, "minimum disk size 1 Gi")
    v.must(size <= DISK_MAX_SIZE, f"maximum disk size {DISK_MAX_SIZE} Gi")


class DiskCreate(Model, Validatable):
    """Request to provision a new disk."""

    location: str = ""
    project: str = ""
    name: str = ""
    size: int = 0

    def valid(self) -> ValidationFailed | None:
        self.name = self.name.strip()

        v = Validator()

        v.must(self.location != "", "location required")
        v.must(self.project != "", "project required")
        _check_name_and_size(v, self.name, self.size)

        return wrap_validate(v)


class DiskUpdate(Model, Validatable):
    """Request to resize an existing disk. The whole record is replaced."""

    location: str = ""
    project: str = ""
    name: str = ""
    size: int = 0

    def valid(self) -> ValidationFailed | None:
        self.name = self.name.strip()

        v = Validator()

        v.must(self.location != "", "location required")
        v.must(self.project != "", "project required")
        _check_name_and_size(v, self.name, self.size)

        return wrap_validate(v)


class DiskGet(Model, Validatable):
    location: str = ""
    project: str = ""
    name: str = ""

    def valid(self) -> ValidationFailed | None:
        v = Validator()

        v.must(self.location != "", "location required")
        v.must(self.project != "", "project required")
        v.must(self.name != "", "name required")

        return wrap_validate(v)


class DiskList(Model, Validatable):
    """List disks in a project, optionally narrowed to one location."""

    location: Optional[str] = None
    project: str = ""

    def valid(self) -> ValidationFailed | None:
        v = Validator()

        v.must(self.project != "", "project required")

        return wrap_validate(v)


class DiskDelete(Model, Validatable):
    location: str = ""
    project: str = ""
    name: str = ""

    def valid(self) -> ValueError | None:
        self.name = self.name.strip()

        v = Validator()

        v.must(self.location != "", "location required")
        v.must(self.project != "", "project required")
        v.must(NAME_PATTERN.match(self.name) is not None, "name invalid " + NAME_PATTERN_STR)
        # over-long names short-circuit the aggregate
        if len(self.name) > MAX_NAME_LENGTH:
            return InvalidNameError("name invalid")

        return wrap_validate(v)


class DiskMetrics(Model, Validatable):
    """Request usage and size time series for a disk."""

    location: str = ""
    project: str = ""
    name: str = ""
    time_range: Annotated[str, BeforeValidator(_enum_value)] = ""

    def valid(self) -> ValidationFailed | None:
        self.name = self.name.strip()

        v = Validator()

        v.must(self.location != "", "location required")
        v.must(NAME_PATTERN.match(self.name) is not None, "name invalid " + NAME_PATTERN_STR)
        v.must(
            len(self.name) <= MAX_NAME_LENGTH,
            f"name must have length less than {MAX_NAME_LENGTH} characters",
        )
        v.must(self.project != "", "project required")
        v.must(self.time_range in VALID_DISK_METRICS_TIME_RANGES, "timeRange invalid")

        return wrap_validate(v)


class DiskItem(Model, Tabular):
    """A provisioned disk."""

    project: str = ""
    location: str = ""
    name: str = ""
    size: int = 0
    # unknown backend statuses decode as plain strings
    status: Annotated[Union[Status, str], Field(union_mode="left_to_right")] = Status.pending
    action: str = ""
    created_at: Optional[datetime] = None
    created_by: str = ""
    success_at: Optional[datetime] = None

    def row(self) -> list[str]:
        return [self.name, f"{self.size}Gi", self.location, age(self.created_at)]

    def table(self) -> list[list[str]]:
        return [list(TABLE_HEADER), self.row()]


class DiskListResult(Model, Tabular):
    items: Annotated[list[DiskItem], BeforeValidator(none_as_empty)] = Field(default_factory=list)

    def table(self) -> list[list[str]]:
        table = [list(TABLE_HEADER)]
        for x in self.items:
            table.append(x.row())
        return table


class DiskMetricsLine(Model):
    """A named series of (timestamp, value) points."""

    name: str = ""
    points: Annotated[list[tuple[float, float]], BeforeValidator(none_as_empty)] = Field(
        default_factory=list
    )


class DiskMetricsResult(Model):
    usage: Annotated[list[DiskMetricsLine], BeforeValidator(none_as_empty)] = Field(
        default_factory=list
    )
    size: Annotated[list[DiskMetricsLine], BeforeValidator(none_as_empty)] = Field(
        default_factory=list
    )


class Disk(ABC):
    """
    Disk operations implemented by a transport or backend.

    Every method takes a request that has not necessarily been validated
    and an optional ``timeout`` in seconds bounding the dispatch.
    """

    @abstractmethod
    def create(self, m: DiskCreate, *, timeout: float | None = None) -> Empty:
        pass

    @abstractmethod
    def get(self, m: DiskGet, *, timeout: float | None = None) -> DiskItem:
        pass

    @abstractmethod
    def list(self, m: DiskList, *, timeout: float | None = None) -> DiskListResult:
        pass

    @abstractmethod
    def update(self, m: DiskUpdate, *, timeout: float | None = None) -> Empty:
        pass

    @abstractmethod
    def delete(self, m: DiskDelete, *, timeout: float | None = None) -> Empty:
        pass

    @abstractmethod
    def metrics(self, m: DiskMetrics, *, timeout: float | None = None) -> DiskMetricsResult:
        pass
