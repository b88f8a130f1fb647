"""Factory for building schemas from configuration."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from dataknobs_config import FactoryBase

from .composites import array, record, tuple_
from .exceptions import SchemaDefinitionError
from .lazy import lazy
from .objects import ObjectSchema
from .primitives import (
    bigint,
    boolean,
    date,
    instance_of,
    literal,
    null,
    number,
    string,
    undefined,
    unknown,
)
from .schema import Schema
from .unions import discriminated_union, union

logger = logging.getLogger(__name__)

_SIMPLE_TYPES = {
    "string": string,
    "number": number,
    "boolean": boolean,
    "bigint": bigint,
    "null": null,
    "undefined": undefined,
    "unknown": unknown,
    "date": date,
}

_NODE_KEYS = {
    "type", "optional", "nullable", "nullish", "description",
    "value", "values", "class", "items", "fields", "strict",
    "options", "discriminator", "name",
}


class SchemaFactory(FactoryBase):
    """Factory for creating schemas from configuration.

    Configuration Options:
        type (str): Schema type (string, number, boolean, bigint, null,
            undefined, unknown, date, literal, instance_of, array, tuple,
            record, object, union, discriminated_union, ref)
        optional (bool): Also accept UNDEFINED, i.e. a missing field
        nullable (bool): Also accept None
        nullish (bool): Also accept None and UNDEFINED
        definitions (dict): Named schemas for ``ref`` nodes (top level only)
        schema (dict): Root node, used instead of the top-level keys. Needed
            when the factory is registered in a dataknobs Config, which
            reserves ``type`` and ``name`` for the entry itself

    Type-specific Options:
        literal: ``value`` (scalar) or ``values`` (list of scalars)
        instance_of: ``class`` (dotted import path)
        array: ``items`` (schema node)
        tuple: ``items`` (list of schema nodes)
        record: ``values`` (schema node)
        object: ``fields`` (mapping of name to schema node), ``strict`` (bool)
        union: ``options`` (list of schema nodes)
        discriminated_union: ``discriminator`` (str), ``options`` (object nodes)
        ref: ``name`` (key in ``definitions``)

    Example Configuration:
        definitions:
          category:
            type: object
            fields:
              name:
                type: string
              subcategories:
                type: array
                items:
                  type: ref
                  name: category
        type: ref
        name: category

    Registered in a dataknobs Config:
        schemas:
          - name: category
            factory: dataknobs_schema.SchemaFactory
            schema:
              type: ref
              name: category
            definitions:
              category: ...
    """

    def create(self, **config: Any) -> Schema[Any]:
        """Create a Schema instance from configuration.

        Args:
            **config: Schema configuration

        Returns:
            Schema instance

        Raises:
            SchemaDefinitionError: If the configuration is invalid
        """
        definitions: Dict[str, Schema[Any]] = {}
        raw_definitions = config.pop("definitions", None) or {}
        if not isinstance(raw_definitions, dict):
            raise SchemaDefinitionError(
                "Schema 'definitions' must be a mapping",
                context={"definitions": type(raw_definitions).__name__},
            )

        for name, definition in raw_definitions.items():
            logger.debug(f"Registering schema definition: {name}")
            definitions[name] = self._build(definition, definitions, f"definitions.{name}")

        node: Any = config
        if "schema" in config:
            node = config.pop("schema")
            if config:
                logger.warning(
                    f"Ignoring keys alongside 'schema': {', '.join(sorted(config))}"
                )

        node_type = node.get("type") if isinstance(node, dict) else None
        logger.info(f"Creating schema of type: {node_type}")
        return self._build(node, definitions, "$")

    def from_dict(self, data: Dict[str, Any]) -> Schema[Any]:
        """Create a schema from a configuration dictionary.

        Args:
            data: Schema configuration

        Returns:
            Schema instance
        """
        return self.create(**data)

    def from_yaml(self, source: Union[str, Path]) -> Schema[Any]:
        """Create a schema from a YAML document or a YAML/JSON file.

        Args:
            source: Path to a ``.yaml``, ``.yml`` or ``.json`` file, or YAML text

        Returns:
            Schema instance
        """
        path = Path(source) if isinstance(source, Path) else None
        if path is None and isinstance(source, str):
            candidate = Path(source)
            if candidate.suffix.lower() in (".yaml", ".yml", ".json") and "\n" not in source:
                path = candidate

        if path is not None:
            if not path.exists():
                raise SchemaDefinitionError(
                    f"Schema file not found: {path}", context={"path": str(path)}
                )
            with open(path) as f:
                data = yaml.safe_load(f)
        else:
            data = yaml.safe_load(source)

        if not isinstance(data, dict):
            raise SchemaDefinitionError(
                "Schema document must be a mapping",
                context={"document": type(data).__name__},
            )
        return self.from_dict(data)

    def _build(
        self, node: Any, definitions: Dict[str, Schema[Any]], location: str
    ) -> Schema[Any]:
        """Build one schema node and apply its modifiers.

        Args:
            node: Node configuration
            definitions: Named schemas available to ``ref`` nodes
            location: Dotted location of the node, for error messages

        Returns:
            Schema instance
        """
        if not isinstance(node, dict):
            raise SchemaDefinitionError(
                f"Schema node at {location} must be a mapping",
                context={"location": location},
            )

        node_type = node.get("type")
        if not node_type:
            raise SchemaDefinitionError(
                f"Schema node at {location} is missing 'type'",
                context={"location": location},
            )

        unknown_keys = set(node) - _NODE_KEYS
        if unknown_keys:
            logger.warning(
                f"Ignoring unknown keys at {location}: {', '.join(sorted(unknown_keys))}"
            )

        schema = self._build_type(str(node_type).lower(), node, definitions, location)

        if node.get("nullish"):
            schema = schema.nullish()
        else:
            if node.get("nullable"):
                schema = schema.nullable()
            if node.get("optional"):
                schema = schema.optional()
        return schema

    def _build_type(
        self,
        node_type: str,
        node: Dict[str, Any],
        definitions: Dict[str, Schema[Any]],
        location: str,
    ) -> Schema[Any]:
        """Build the schema for a node's type, without modifiers."""
        if node_type in _SIMPLE_TYPES:
            return _SIMPLE_TYPES[node_type]()

        if node_type == "literal":
            if "values" in node:
                return literal(list(self._require(node, "values", location)))
            return literal(self._require(node, "value", location))

        if node_type == "instance_of":
            return instance_of(self._load_class(self._require(node, "class", location)))

        if node_type == "array":
            items = self._require(node, "items", location)
            return array(self._build(items, definitions, f"{location}.items"))

        if node_type == "tuple":
            items = self._require_list(node, "items", location)
            return tuple_([
                self._build(item, definitions, f"{location}.items[{index}]")
                for index, item in enumerate(items)
            ])

        if node_type == "record":
            values = self._require(node, "values", location)
            return record(self._build(values, definitions, f"{location}.values"))

        if node_type == "object":
            fields = node.get("fields") or {}
            if not isinstance(fields, dict):
                raise SchemaDefinitionError(
                    f"Object 'fields' at {location} must be a mapping",
                    context={"location": location},
                )
            return ObjectSchema(
                {
                    name: self._build(field, definitions, f"{location}.fields.{name}")
                    for name, field in fields.items()
                },
                strict=bool(node.get("strict", False)),
            )

        if node_type == "union":
            options = self._require_list(node, "options", location)
            return union([
                self._build(option, definitions, f"{location}.options[{index}]")
                for index, option in enumerate(options)
            ])

        if node_type == "discriminated_union":
            discriminator = self._require(node, "discriminator", location)
            options = self._require_list(node, "options", location)
            return discriminated_union(
                discriminator,
                [
                    self._build(option, definitions, f"{location}.options[{index}]")  # type: ignore[misc]
                    for index, option in enumerate(options)
                ],
            )

        if node_type == "ref":
            name = self._require(node, "name", location)
            return lazy(lambda: self._resolve_ref(name, definitions, location))

        raise SchemaDefinitionError(
            f"Invalid schema type at {location}: {node_type}",
            context={"location": location, "type": node_type},
        )

    def _resolve_ref(
        self, name: str, definitions: Dict[str, Schema[Any]], location: str
    ) -> Schema[Any]:
        """Look up a named definition for a ``ref`` node."""
        if name not in definitions:
            raise SchemaDefinitionError(
                f"Unknown schema reference at {location}: {name}",
                context={"location": location, "name": name, "available": list(definitions)},
            )
        return definitions[name]

    def _load_class(self, class_path: str) -> type:
        """Load a class from a dotted module path (e.g. "decimal.Decimal")."""
        if not isinstance(class_path, str) or "." not in class_path:
            raise SchemaDefinitionError(
                f"Invalid class path: {class_path}", context={"class": class_path}
            )
        module_path, class_name = class_path.rsplit(".", 1)
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise SchemaDefinitionError(
                f"Failed to import {class_path}: {e}", context={"class": class_path}
            ) from e

        cls = getattr(module, class_name, None)
        if not isinstance(cls, type):
            raise SchemaDefinitionError(
                f"Class {class_name} not found in {module_path}",
                context={"class": class_path},
            )
        return cls

    @staticmethod
    def _require(node: Dict[str, Any], key: str, location: str) -> Any:
        """Get a required key from a node."""
        if key not in node:
            raise SchemaDefinitionError(
                f"Schema node at {location} of type '{node.get('type')}' requires '{key}'",
                context={"location": location, "key": key},
            )
        return node[key]

    def _require_list(self, node: Dict[str, Any], key: str, location: str) -> list:
        """Get a required list from a node."""
        value = self._require(node, key, location)
        if not isinstance(value, list):
            raise SchemaDefinitionError(
                f"'{key}' at {location} must be a list",
                context={"location": location, "key": key},
            )
        return value


# Create singleton instance for registration
schema_factory = SchemaFactory()
