"""Air traffic simulation with aircraft, control towers and collisions."""

__version__ = "0.1.0"
__all__ = ["app", "collision", "entities", "mathutil", "parsing", "printf", "simulation", "textutil"]