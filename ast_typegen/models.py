"""Pydantic schemas for the node-schema registry consumed by the generator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .schema.validators import Validator, parse_validator


class FieldSpec(BaseModel):
    """Per-field metadata attached to one node kind.

    Attributes:
        validator: Parsed validator variant, or ``None`` when the field is
            unconstrained.  Native option objects are accepted under the
            ``validate`` alias and converted with
            :func:`~ast_typegen.schema.validators.parse_validator`.
        optional: ``True`` when the field may be omitted or null.
        default: Default value; ``None`` means the field has no default.

    Invariants:
        - Instances are frozen; the generator never mutates registry input.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, populate_by_name=True)

    validator: Validator | None = Field(default=None, alias="validate")
    optional: bool = False
    default: Any = None

    @field_validator("validator", mode="before")
    @classmethod
    def parse_native_validator(cls, value: Any) -> Validator | None:
        """Accept native validator option objects."""

        return parse_validator(value)

    @field_validator("optional", mode="before")
    @classmethod
    def coerce_optional(cls, value: Any) -> bool:
        return bool(value)

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_optional(self) -> bool:
        """Whether the field may be omitted at construction time."""

        return self.optional or self.has_default


class NodeKindSpec(BaseModel):
    """Registry entry describing one node kind.

    Attributes:
        name: Node kind name, e.g. ``"Identifier"``.
        builder_keys: Field names in construction-argument order.
        fields: Mapping from field name to :class:`FieldSpec`.
        aliases: Alias (category) names the kind belongs to.

    Invariants:
        - Every builder key has a matching entry in ``fields``.

    Example:
        >>> NodeKindSpec(
        ...     name="Identifier",
        ...     builder_keys=("name",),
        ...     fields={"name": FieldSpec(validate={"type": "string"})},
        ...     aliases=("Expression",),
        ... )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    builder_keys: tuple[str, ...] = ()
    fields: dict[str, FieldSpec] = Field(default_factory=dict)
    aliases: tuple[str, ...] = ()

    @model_validator(mode="after")
    def validate_builder_keys_known(self) -> "NodeKindSpec":
        """Reject builder keys that have no field entry."""

        missing = [key for key in self.builder_keys if key not in self.fields]
        if missing:
            raise ValueError(f"{self.name}: builder keys without field entry: {missing}")
        return self

    def ordered_fields(self) -> list[str]:
        """Field names, builder keys first in construction order, then the rest sorted."""

        position = {key: idx for idx, key in enumerate(self.builder_keys)}
        return sorted(
            self.fields,
            key=lambda name: (0, position[name], "") if name in position else (1, 0, name),
        )
