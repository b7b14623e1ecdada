from .protocols import BoundaryEngine, BoundaryHandle

__all__ = ["BoundaryEngine", "BoundaryHandle", "default_engine"]


def default_engine() -> BoundaryEngine:
    from .icu import IcuBoundaryEngine

    return IcuBoundaryEngine()
