"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Formatting helpers for listing columns.
"""
import time
from typing import Optional


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to a compact human-readable string (e.g., 512B, 1.5KB, 3.2MB).
        Whole bytes are shown without decimals.
        """
        if size_bytes < 0:
            return "0B"
        if size_bytes < 1024:
            return f"{int(size_bytes)}B"

        size = float(size_bytes)
        for unit in ["KB", "MB", "GB", "TB", "PB"]:
            size /= 1024
            if size < 1024:
                return f"{size:.1f}{unit}"
        return f"{size / 1024:.1f}EB"

    @staticmethod
    def timestamp_to_human(timestamp: Optional[float], fmt: str = "%Y-%m-%d %H:%M") -> str:
        """
        Convert a Unix timestamp to a local-time string.
        Missing or out-of-range timestamps render as a dash.
        """
        if timestamp is None:
            return "-"
        try:
            return time.strftime(fmt, time.localtime(timestamp))
        except (OverflowError, OSError, ValueError):
            return "-"
