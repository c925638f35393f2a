"""Memory regions backing loaded resources."""

from artpipe.memory.arena import DEFAULT_REGION_SIZE, Arena

__all__ = ["DEFAULT_REGION_SIZE", "Arena"]
