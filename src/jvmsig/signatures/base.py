"""Common base for every parsed signature node and aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod


class HierarchicalTypeSignature(ABC):
    """A node of a parsed generic signature."""

    @abstractmethod
    def get_all_referenced_class_names(self, class_names: set[str]) -> None:
        """Add every class name referenced by this node and its children.

        Args:
            class_names: Set that receives the dotted class names.
        """

    @property
    @abstractmethod
    def descriptor(self) -> str:
        """The node rendered back into signature grammar form."""

    def referenced_class_names(self) -> set[str]:
        """Return the class names referenced by this node as a new set."""
        class_names: set[str] = set()
        self.get_all_referenced_class_names(class_names)
        return class_names
