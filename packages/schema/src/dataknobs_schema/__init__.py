"""DataKnobs Schema Package - Composable parsing of untyped data.

The `dataknobs-schema` package turns untrusted values (decoded JSON, YAML,
form data) into validated Python values using small schema objects that
compose into trees.

Modules:
    schema: Schema base class with parse, safe_parse and combinators
    primitives: Scalar kinds, literals, unknown and instance checks
    composites: Array, tuple and record schemas
    objects: Object schemas with shape introspection and strict mode
    unions: Unions and discriminated unions
    lazy: Deferred schemas for recursive definitions
    factory: Building schemas from configuration (dicts or YAML)
    exceptions: Custom exceptions for error handling

Quick Examples:

    Parse a value:

    ```python
    from dataknobs_schema import array, number, object_, string

    user = object_({
        "name": string(),
        "age": number().optional(),
        "tags": array(string()),
    })
    user.parse({"name": "Ada", "tags": ["admin"]})
    ```

    Collect every error instead of raising:

    ```python
    result = user.safe_parse({"name": 1, "tags": ["ok", 2]})
    if not result:
        print(result.message)
        # Validation failed: Expected string, got number 1 (at path /name),
        # Expected string, got number 2 (at path /tags/1)
    ```
"""

from .composites import ArraySchema, RecordSchema, TupleSchema, array, record, tuple_
from .context import ValidationContext
from .exceptions import SchemaDefinitionError, SchemaError, ValidationException
from .factory import SchemaFactory, schema_factory
from .lazy import LazySchema, lazy
from .objects import ObjectSchema, object_, strict_object
from .primitives import (
    InstanceOfSchema,
    KindSchema,
    LiteralSchema,
    UnknownSchema,
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
from .result import ParseResult, SafeParseResult, ValidationError, format_errors
from .schema import Schema, TransformSchema
from .unions import (
    DiscriminatedUnionSchema,
    UnionSchema,
    discriminated_union,
    nullable,
    nullish,
    optional,
    union,
)
from .values import UNDEFINED, inspect_value

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core classes
    "Schema",
    "TransformSchema",
    "KindSchema",
    "LiteralSchema",
    "UnknownSchema",
    "InstanceOfSchema",
    "ArraySchema",
    "TupleSchema",
    "RecordSchema",
    "ObjectSchema",
    "UnionSchema",
    "DiscriminatedUnionSchema",
    "LazySchema",
    # Constructors
    "string",
    "number",
    "boolean",
    "bigint",
    "null",
    "undefined",
    "literal",
    "unknown",
    "instance_of",
    "date",
    "array",
    "tuple_",
    "record",
    "object_",
    "strict_object",
    "union",
    "discriminated_union",
    "lazy",
    "optional",
    "nullable",
    "nullish",
    # Values
    "UNDEFINED",
    "inspect_value",
    # Results
    "ValidationContext",
    "ValidationError",
    "ParseResult",
    "SafeParseResult",
    "format_errors",
    # Factory
    "SchemaFactory",
    "schema_factory",
    # Exceptions
    "SchemaError",
    "ValidationException",
    "SchemaDefinitionError",
]
