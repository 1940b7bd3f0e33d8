"""Small utilities: a none marker, argument packs, type registries and permutations."""

__version__ = "0.1.0"
__all__ = ["args", "none", "permutations", "registry"]