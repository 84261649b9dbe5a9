"""Value model shared by the parser and the serializer."""

from typing import TypeAlias

# Type aliases for domain concepts - recursive definition
JsonValue: TypeAlias = (
    None | bool | float | str | list["JsonValue"] | dict[str, "JsonValue"]
)
Position: TypeAlias = int

# Containers the parser may place at the document root by default
CONTAINER_OPENERS = frozenset("{[")

# Default nesting limit for objects and arrays
MAX_DEPTH = 20

# Largest configurable limit; two interpreter frames per level stay well
# inside the default recursion limit
MAX_DEPTH_CEILING = 256
