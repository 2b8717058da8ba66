"""Nuclear decay and photon/electron interactions, with a command-line scenario."""

__version__ = "0.1.0"
__all__ = ["particles", "nuclei", "cli"]