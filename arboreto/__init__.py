"""Max-heap, binary search tree and AVL tree implementations with console demos."""

__version__ = "0.1.0"
__all__ = ["avl", "avl_cli", "bst", "bst_cli", "maxheap", "maxheap_cli"]