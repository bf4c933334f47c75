"""Reference solutions to the exercise topics, one module per topic."""

__all__ = [
    "variables",
    "functions",
    "control",
    "primitive_types",
    "strings",
    "modules",
    "macros",
    "conversions",
    "vectors_maps",
    "error_handling",
    "stdlib_types",
    "option",
    "enums",
    "structs",
    "generics",
    "traits",
    "move_semantics",
    "threads",
    "clippy",
    "quizzes",
]