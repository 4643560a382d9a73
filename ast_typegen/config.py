"""Configuration objects for declaration and wrapper generation."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GeneratorConfig:
    """Names and destinations used when emitting the generated artifacts.

    The defaults reproduce the Flow declarations and ``babel-types`` wrapper
    layout for ``@babel/types``.

    Attributes:
        source_label: Generating entry point named in the disclaimer header.
        declarations_path: Destination of the type-declaration artifact,
            relative to the output root.
        wrapper_path: Destination of the wrapper-module artifact, relative to
            the output root.
        universal_alias: Alias every node kind implicitly belongs to.
        excluded_aliases: Aliases never emitted as union declarations.
        unknown_type: Type used when a field cannot be narrowed.
        skipped_fields: Field names left out of declaration blocks.
        reserved_words: Field names renamed with a ``_`` prefix in builder
            parameter lists.
        sequence_type: Read-only sequence type applied to array validators.
        aggregate_name: Name of the exported wrapper object.
        delegate_setter: Name of the function that installs the delegate.
    """

    source_label: str = "ast_typegen/runner.py"
    declarations_path: str = "flow-typed/babel-nodes.js"
    wrapper_path: str = "src/lib/babel-types.js"
    universal_alias: str = "BabelNode"
    excluded_aliases: tuple[str, ...] = ("Function",)
    unknown_type: str = "mixed"
    skipped_fields: tuple[str, ...] = ("static",)
    reserved_words: frozenset[str] = field(
        default_factory=lambda: frozenset({"extends", "arguments", "static", "default"})
    )
    sequence_type: str = "$ReadOnlyArray"
    aggregate_name: str = "BabelTypes"
    delegate_setter: str = "setBabelTypes"

    @property
    def disclaimer(self) -> str:
        return f"AUTOMATICALLY GENERATED BY {self.source_label}"
