"""Schema Bases — shared camelCase configuration and patch semantics.

Invariants:
    - Request models reject unknown fields (extra="forbid")
    - Patch models: absent field = unchanged; explicit null only for nullable columns
    - Response models read straight from ORM objects (from_attributes)

Design Decisions:
    - alias_generator=to_camel + populate_by_name: Python code uses snake_case,
      the wire stays camelCase (same pattern as models_library in osparc)
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(CamelModel):
    model_config = ConfigDict(extra="forbid", use_enum_values=True)


class PatchModel(RequestModel):
    """Partial update — every field optional, present fields keep their constraints."""

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Fields the client actually sent, as column-name -> value."""
        return self.model_dump(exclude_unset=True, exclude=exclude)


class ResponseModel(CamelModel):
    model_config = ConfigDict(from_attributes=True)
