class GenerationError(RuntimeError):
    """A generation invariant was violated; the level must not be used."""


__all__ = ["GenerationError"]
