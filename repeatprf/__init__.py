"""DNA repeat profile generation, hole regions and sequencing trace statistics."""

__version__ = "1.0.0"
__all__ = ["genprf", "regions", "tracestat"]