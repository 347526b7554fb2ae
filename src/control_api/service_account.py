"""Service account request and result models."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BeforeValidator, Field

from .base import Model, Tabular, Validatable, none_as_empty
from .const import (
    MIN_NAME_LENGTH,
    SERVICE_ACCOUNT_NAME_MAX_LENGTH,
    SID_MAX_LENGTH,
    SID_MIN_LENGTH,
    SID_PATTERN,
    SID_PATTERN_STR,
)
from .errors import ValidationFailed
from .types import Empty, age
from .validator import Validator, wrap_validate


TABLE_HEADER = ["ID", "EMAIL", "NAME", "AGE"]


class _ServiceAccountFields(Model, Validatable):
    project: str = ""
    sid: str = ""
    name: str = ""
    description: str = ""

    def valid(self) -> ValidationFailed | None:
        self.sid = self.sid.strip()
        self.name = self.name.strip()
        self.description = self.description.strip()

        v = Validator()

        v.must(self.project != "", "project required")
        if v.must(self.sid != "", "sid required"):
            v.must(SID_PATTERN.match(self.sid) is not None, f"sid invalid {SID_PATTERN_STR}")
            v.must(
                SID_MIN_LENGTH <= len(self.sid) <= SID_MAX_LENGTH,
                f"sid must have length between {SID_MIN_LENGTH}-{SID_MAX_LENGTH} characters",
            )
        v.must(
            MIN_NAME_LENGTH <= len(self.name) <= SERVICE_ACCOUNT_NAME_MAX_LENGTH,
            f"name must have length between {MIN_NAME_LENGTH}-{SERVICE_ACCOUNT_NAME_MAX_LENGTH} characters",
        )

        return wrap_validate(v)


class ServiceAccountCreate(_ServiceAccountFields):
    """Request to create a service account identified by a chosen SID."""


class ServiceAccountUpdate(_ServiceAccountFields):
    """Request to replace the display fields of a service account."""


class _ServiceAccountRef(Model, Validatable):
    project: str = ""
    # carries the SID
    id: str = ""

    def valid(self) -> ValidationFailed | None:
        v = Validator()

        v.must(self.project != "", "project required")
        v.must(self.id != "", "service account id required")

        return wrap_validate(v)


class ServiceAccountGet(_ServiceAccountRef):
    pass


class ServiceAccountDelete(_ServiceAccountRef):
    """Delete a service account; all of its keys stop working."""


class ServiceAccountCreateKey(_ServiceAccountRef):
    """Issue a new key. The secret is only disclosed in the response."""


class ServiceAccountDeleteKey(Model, Validatable):
    """Revoke the key holding ``secret``."""

    project: str = ""
    id: str = ""
    secret: str = ""

    def valid(self) -> ValidationFailed | None:
        v = Validator()

        v.must(self.project != "", "project required")
        v.must(self.id != "", "service account id required")
        v.must(self.secret != "", "secret required")

        return wrap_validate(v)


class ServiceAccountList(Model, Validatable):
    project: str = ""

    def valid(self) -> ValidationFailed | None:
        v = Validator()

        v.must(self.project != "", "project required")

        return wrap_validate(v)


class ServiceAccountKey(Model):
    secret: str = ""
    created_at: Optional[datetime] = None
    created_by: str = ""


class ServiceAccountListItem(Model):
    sid: str = ""
    email: str = ""
    name: str = ""
    description: str = ""
    created_at: Optional[datetime] = None
    created_by: str = ""

    def row(self) -> list[str]:
        return [self.sid, self.email, self.name, age(self.created_at)]


class ServiceAccountListResult(Model, Tabular):
    project: str = ""
    items: Annotated[list[ServiceAccountListItem], BeforeValidator(none_as_empty)] = Field(
        default_factory=list
    )

    def table(self) -> list[list[str]]:
        table = [list(TABLE_HEADER)]
        for x in self.items:
            table.append(x.row())
        return table


class ServiceAccountGetResult(Model, Tabular):
    """A service account together with its keys."""

    sid: str = ""
    project: str = ""
    email: str = ""
    name: str = ""
    description: str = ""
    created_at: Optional[datetime] = None
    created_by: str = ""
    keys: Annotated[list[ServiceAccountKey], BeforeValidator(none_as_empty)] = Field(
        default_factory=list
    )

    def table(self) -> list[list[str]]:
        return [
            list(TABLE_HEADER),
            [self.sid, self.email, self.name, age(self.created_at)],
        ]


class ServiceAccount(ABC):
    """
    Service account operations implemented by a transport or backend.

    Deleting an account invalidates all of its keys; that is left to the
    implementation.
    """

    @abstractmethod
    def create(self, m: ServiceAccountCreate, *, timeout: float | None = None) -> Empty:
        pass

    @abstractmethod
    def get(
        self, m: ServiceAccountGet, *, timeout: float | None = None
    ) -> ServiceAccountGetResult:
        pass

    @abstractmethod
    def list(
        self, m: ServiceAccountList, *, timeout: float | None = None
    ) -> ServiceAccountListResult:
        pass

    @abstractmethod
    def update(self, m: ServiceAccountUpdate, *, timeout: float | None = None) -> Empty:
        pass

    @abstractmethod
    def delete(self, m: ServiceAccountDelete, *, timeout: float | None = None) -> Empty:
        pass

    @abstractmethod
    def create_key(
        self, m: ServiceAccountCreateKey, *, timeout: float | None = None
    ) -> ServiceAccountKey:
        pass

    @abstractmethod
    def delete_key(self, m: ServiceAccountDeleteKey, *, timeout: float | None = None) -> Empty:
        pass
