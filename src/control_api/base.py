"""Base model and capability interfaces shared by all request and result types."""

from abc import ABC, abstractmethod
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Model(BaseModel):
    """Wire model with lowerCamelCase keys in both JSON and YAML form."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dict with wire keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes):
        return cls.model_validate_json(data)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    @classmethod
    def from_yaml(cls, data: str):
        return cls.model_validate(yaml.safe_load(data) or {})


class Validatable(ABC):
    """Request that checks its own fields before dispatch."""

    @abstractmethod
    def valid(self) -> Exception | None:
        """
        Normalize free-text fields in place and check every rule.

        Returns:
            The validation error, or None when the request is valid
        """


class Tabular(ABC):
    """Result that can render itself as a header row plus data rows."""

    @abstractmethod
    def table(self) -> list[list[str]]:
        pass


def none_as_empty(value: Any) -> Any:
    """Decode JSON null list fields as empty lists."""
    if value is None:
        return []
    return value
