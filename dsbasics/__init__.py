"""Dynamic array, stack, doubly linked list, queue and binary search tree, plus a small terminal contact book."""

__version__ = "0.1.0"
__all__ = ["bst", "contact", "dynamic_array", "linked_list", "linked_queue", "stack"]