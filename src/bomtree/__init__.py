"""bomtree – equipment Bill-of-Materials tree engine."""

from loguru import logger

__all__ = ["logger"]
