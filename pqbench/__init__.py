"""Priority queues on a linked list, a sorted array and a binary heap, with a timing benchmark."""

__version__ = "0.1.0"

__all__ = ["binary_heap", "linked_list", "dynamic_array", "benchmark"]