from .parameters import DEFAULT_CLUSTERING, Parameters

__all__ = [
    "DEFAULT_CLUSTERING",
    "Parameters",
]
