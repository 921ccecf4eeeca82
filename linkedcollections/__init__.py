"""Node-based doubly linked list, queue and stack collections, with a printed demo."""

__version__ = "0.1.0"
__all__ = ["nodes", "doubly_linked_list", "linked_queue", "linked_stack", "demo"]