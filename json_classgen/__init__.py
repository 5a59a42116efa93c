"""Generate Java, Python and C# classes from a sample JSON document."""

from .analyzer import (
    DEFAULT_MAX_DEPTH,
    RecursionDepthExceededError,
    infer_schema,
    map_primitive,
)
from .codegen import (
    __version__,
    generate_all,
    generate_from_schema,
    generate_from_value,
    emit,
    emit_java,
    emit_python,
    emit_csharp,
    quick_generate,
)
from .utils import clean_json_text, parse_json_text, load_json

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "RecursionDepthExceededError",
    "infer_schema",
    "map_primitive",
    "generate_all",
    "generate_from_schema",
    "generate_from_value",
    "emit",
    "emit_java",
    "emit_python",
    "emit_csharp",
    "quick_generate",
    "clean_json_text",
    "parse_json_text",
    "load_json",
    "__version__",
]
