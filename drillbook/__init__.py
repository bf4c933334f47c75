"""A runner that compiles, tests and tracks small programming exercises, with worked solutions."""

__version__ = "0.1.0"