"""Runtime class descriptors with a name registry and parent links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional


@dataclass(eq=False)
class UClass:
    """Describes a reflected class: its name and its parent descriptor."""

    name: str
    super_class: Optional["UClass"] = None

    _registry: ClassVar[Dict[str, "UClass"]] = {}
    _root: ClassVar[Optional["UClass"]] = None

    @classmethod
    def root(cls) -> "UClass":
        """The descriptor at the top of every hierarchy."""
        if UClass._root is None:
            UClass._root = UClass("UClass", None)
        return UClass._root

    @classmethod
    def find_class(cls, name: str) -> Optional["UClass"]:
        """Look up a registered descriptor by name."""
        return UClass._registry.get(name)

    @classmethod
    def register_class(cls, klass: "UClass") -> None:
        """Register ``klass`` under its name, replacing any earlier entry."""
        UClass._registry[klass.name] = klass

    def is_child_of(self, parent: Optional["UClass"]) -> bool:
        """True if ``parent`` is this descriptor or one of its ancestors."""
        current: Optional[UClass] = self
        while current is not None:
            if current is parent:
                return True
            current = current.super_class
        return False

    def is_a(self, reflected_type: type) -> bool:
        """True if this descriptor derives from ``reflected_type``'s descriptor."""
        return self.is_child_of(reflected_type.static_class())


class Reflected:
    """Base for classes that get a registered :class:`UClass` when defined.

    A subclass may pass ``class_name=...`` to register under another name.
    """

    _uclass: ClassVar[UClass] = UClass.root()

    def __init_subclass__(cls, class_name: Optional[str] = None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        parent = next(
            (base for base in cls.__bases__ if issubclass(base, Reflected)), Reflected
        )
        cls._uclass = UClass(class_name or cls.__name__, parent.static_class())
        UClass.register_class(cls._uclass)

    @classmethod
    def static_class(cls) -> UClass:
        return cls._uclass

    def get_class(self) -> UClass:
        return type(self).static_class()