"""Schema validation entry point and pluggable validation engines.

The gate only builds the schema description and dispatches to a validator, so
an engine can be swapped without touching the file handle.
"""

from .gate import (
    SchemaGate,
    build_schema_description,
    check_syntax,
    normalize_schema_uri,
)
from .validators import (
    JsonSchemaValidator,
    PassThroughValidator,
    SchemaIssue,
    SchemaValidator,
)
