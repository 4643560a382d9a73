from __future__ import annotations

from typing import Any

from .schema.registry import NodeSchemaRegistry, registry_from_payload

_EXPRESSION = {"type": "Expression"}


def _array_of(item: dict[str, Any]) -> dict[str, Any]:
    return {"chainOf": [{"type": "array"}, {"each": item}]}


SAMPLE_REGISTRY_TABLES: dict[str, Any] = {
    "BUILDER_KEYS": {
        "BinaryExpression": ["operator", "left", "right"],
        "BooleanLiteral": ["value"],
        "CallExpression": ["callee", "arguments"],
        "ClassMethod": ["kind", "key", "params", "body", "computed", "static"],
        "FunctionExpression": ["id", "params", "body", "generator", "async"],
        "Identifier": ["name"],
        "JSXText": ["value"],
        "MemberExpression": ["object", "property", "computed", "optional"],
        "NumericLiteral": ["value"],
        "StringLiteral": ["value"],
        "TemplateElement": ["value", "tail"],
    },
    "ALIAS_KEYS": {
        "BinaryExpression": ["Binary", "Expression"],
        "BooleanLiteral": ["Expression", "Pureish", "Literal", "Immutable"],
        "CallExpression": ["Expression"],
        "ClassMethod": ["Function", "Scopable", "BlockParent", "FunctionParent", "Method"],
        "FunctionExpression": [
            "Scopable",
            "Function",
            "BlockParent",
            "FunctionParent",
            "Expression",
            "Pureish",
        ],
        "Identifier": ["Expression", "PatternLike", "LVal"],
        "JSXText": ["JSX", "Immutable"],
        "MemberExpression": ["Expression", "LVal"],
        "NumericLiteral": ["Expression", "Pureish", "Literal", "Immutable"],
        "StringLiteral": ["Expression", "Pureish", "Literal", "Immutable"],
        "TemplateElement": [],
    },
    "NODE_FIELDS": {
        "BinaryExpression": {
            "operator": {"validate": {"oneOf": ["+", "-", "*", "/", "==", "===", "in"]}},
            "left": {"validate": _EXPRESSION},
            "right": {"validate": _EXPRESSION},
        },
        "BooleanLiteral": {"value": {"validate": {"type": "boolean"}}},
        "CallExpression": {
            "callee": {"validate": _EXPRESSION},
            "arguments": {
                "validate": _array_of(
                    {
                        "oneOfNodeTypes": [
                            "Expression",
                            "SpreadElement",
                            "JSXNamespacedName",
                            "ArgumentPlaceholder",
                        ]
                    }
                )
            },
            "optional": {"validate": {"oneOf": [True, False]}, "optional": True},
            "typeArguments": {
                "validate": {"type": "TypeParameterInstantiation"},
                "optional": True,
            },
        },
        "ClassMethod": {
            "kind": {
                "validate": {
                    "chainOf": [
                        {"type": "string"},
                        {"oneOf": ["get", "set", "method", "constructor"]},
                    ]
                },
                "default": "method",
            },
            "key": {
                "validate": {
                    "oneOfNodeTypes": ["Identifier", "StringLiteral", "NumericLiteral", "Expression"]
                }
            },
            "params": {
                "validate": _array_of(
                    {
                        "oneOfNodeTypes": [
                            "Identifier",
                            "Pattern",
                            "RestElement",
                            "TSParameterProperty",
                        ]
                    }
                )
            },
            "body": {"validate": {"type": "BlockStatement"}},
            "computed": {"validate": {"type": "boolean"}, "default": False},
            "static": {"validate": {"type": "boolean"}, "default": False},
            "async": {"validate": {"type": "boolean"}, "default": False},
            "decorators": {"validate": _array_of({"type": "Decorator"}), "optional": True},
        },
        "FunctionExpression": {
            "id": {"validate": {"type": "Identifier"}, "optional": True},
            "params": {
                "validate": _array_of(
                    {"oneOfNodeTypes": ["Identifier", "Pattern", "RestElement"]}
                )
            },
            "body": {"validate": {"type": "BlockStatement"}},
            "generator": {"validate": {"type": "boolean"}, "default": False},
            "async": {"validate": {"type": "boolean"}, "default": False},
        },
        "Identifier": {
            "name": {"validate": {"type": "string"}},
            "optional": {"validate": {"type": "boolean"}, "optional": True},
            "typeAnnotation": {
                "validate": {"oneOfNodeTypes": ["TypeAnnotation", "TSTypeAnnotation", "Noop"]},
                "optional": True,
            },
            "decorators": {"validate": _array_of({"type": "Decorator"}), "optional": True},
        },
        "JSXText": {"value": {"validate": {"type": "string"}}},
        "MemberExpression": {
            "object": {"validate": {"oneOfNodeTypes": ["Expression", "Super"]}},
            "property": {"validate": {"oneOfNodeTypes": ["Identifier", "PrivateName"]}},
            "computed": {"default": False},
            "optional": {"validate": {"oneOf": [True, False]}, "optional": True},
        },
        "NumericLiteral": {"value": {"validate": {"type": "number"}}},
        "StringLiteral": {"value": {"validate": {"type": "string"}}},
        "TemplateElement": {
            "value": {
                "validate": {
                    "shapeOf": {
                        "raw": {"type": "string"},
                        "cooked": {"type": "string", "optional": True},
                    }
                }
            },
            "tail": {"validate": {"type": "boolean"}, "default": False},
        },
    },
}


def load_sample_registry() -> NodeSchemaRegistry:
    """Small ``@babel/types``-shaped registry for demos and tests."""

    return registry_from_payload(SAMPLE_REGISTRY_TABLES)
