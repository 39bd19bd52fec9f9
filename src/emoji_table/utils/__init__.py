"""
Utility Modules
"""

from emoji_table.utils.fingerprint import calculate_data_hash, calculate_file_hash
from emoji_table.utils.progress import create_rich_progress_bar

__all__ = [
    "calculate_data_hash",
    "calculate_file_hash",
    "create_rich_progress_bar",
]
