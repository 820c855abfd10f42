"""Graph algorithms, a disjoint-set structure, segment trees and a trie."""

__version__ = "0.1.0"