"""Classic data structures, sorts, searches and integer arithmetic in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "fifo_queue",
    "hash_table",
    "heap",
    "linked_list",
    "mathematics",
    "searching",
    "sorting",
    "stack",
    "text_string",
]