"""Services that touch the disk on behalf of the pure core."""

from .size_service import SizeService

__all__ = ["SizeService"]
