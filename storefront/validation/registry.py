"""
Schema registry.

Holds named, immutable schemas. Names are unique for the lifetime of the
registry: there is no replace or remove operation, and defining a name twice
raises SchemaConflictError so one schema can never shadow another.
"""

import logging
from typing import Dict, Iterator, List, Optional, Type, Union

from pydantic import BaseModel

from storefront.validation.errors import SchemaConflictError, SchemaNotFoundError
from storefront.validation.schema import FieldDefinitions, Schema
from storefront.validation.schema import define as define_schema
from storefront.validation.schema import partial as partial_schema

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Mapping of schema name -> Schema, append-only."""

    def __init__(self) -> None:
        self._schemas: Dict[str, Schema] = {}

    def register(self, schema: Schema) -> Schema:
        """
        Add an already-built schema.

        Raises:
            SchemaConflictError: If the name is taken
        """
        self._ensure_available(schema.name)
        self._schemas[schema.name] = schema
        logger.debug(f"Registered schema '{schema.name}' with {len(schema.field_names)} fields")
        return schema

    def define(
        self,
        name: str,
        fields: Union[Type[BaseModel], FieldDefinitions],
        *,
        description: Optional[str] = None,
    ) -> Schema:
        """Build a schema and register it under `name`."""
        self._ensure_available(name)
        return self.register(define_schema(name, fields, description=description))

    def partial(
        self,
        base: Union[str, Schema],
        name: str,
        *,
        description: Optional[str] = None,
    ) -> Schema:
        """Derive an all-optional variant of `base` and register it under `name`."""
        base_schema = self.get(base) if isinstance(base, str) else base
        self._ensure_available(name)
        return self.register(partial_schema(base_schema, name, description=description))

    def get(self, name: str) -> Schema:
        """
        Look up a schema by name.

        Raises:
            SchemaNotFoundError: If no schema is registered under `name`
        """
        try:
            return self._schemas[name]
        except KeyError:
            raise SchemaNotFoundError(name) from None

    def names(self) -> List[str]:
        """Registered names, sorted."""
        return sorted(self._schemas)

    def _ensure_available(self, name: str) -> None:
        if name in self._schemas:
            raise SchemaConflictError(name)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[Schema]:
        return iter(list(self._schemas.values()))

    def __len__(self) -> int:
        return len(self._schemas)
