from .collection import Collection, EmptyReduceError  # noqa: F401
