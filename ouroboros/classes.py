"""Runtime class definitions with single inheritance, and their instances."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


class ClassNotFoundError(LookupError):
    """Raised when an instance is requested for a class that is not registered."""


@dataclass(eq=False)
class ClassDef:
    """A registered class: its name, optional base class and field defaults."""

    name: str
    base: Optional[ClassDef] = None
    fields: dict[str, str] = field(default_factory=dict)


@dataclass(eq=False)
class Instance:
    """An object whose own fields shadow those of its class."""

    cls: ClassDef
    registry: ClassRegistry = field(repr=False)
    fields: dict[str, str] = field(default_factory=dict)

    def set_field(self, field: str, value: str) -> None:
        """Set a field on this instance only."""
        self.fields[field] = value
        print(f"[INSTANCE] {self.cls.name}.{field} = {value}")

    def get_field(self, field: str) -> Optional[str]:
        """Look up a field on the instance, then on its class chain."""
        if field in self.fields:
            return self.fields[field]
        return self.registry.get_field(self.cls.name, field)


class ClassRegistry:
    """All classes known to the runtime; later registrations shadow earlier ones."""

    def __init__(self) -> None:
        self._classes: list[ClassDef] = []

    def _newest_first(self) -> Iterator[ClassDef]:
        return reversed(self._classes)

    def _find(self, name: str) -> Optional[ClassDef]:
        return next((cls for cls in self._newest_first() if cls.name == name), None)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name) is not None

    def register(self, name: str, base_name: Optional[str] = None) -> ClassDef:
        """Register a class; the base is resolved now, among classes already known."""
        base = self._find(base_name) if base_name is not None else None
        cls = ClassDef(name, base)
        self._classes.append(cls)
        suffix = f" : {base_name}" if base_name is not None else ""
        print(f"[CLASS] Registered: {name}{suffix}")
        return cls

    def define_field(self, class_name: str, field: str, value: str) -> None:
        """Set a field default on the named class; unknown classes are ignored."""
        cls = self._find(class_name)
        if cls is None:
            return
        cls.fields[field] = value
        print(f"[CLASS] {class_name}.{field} = {value}")

    def get_field(self, class_name: str, field: str) -> Optional[str]:
        """Look up a field on the named class, falling back to its base class."""
        for cls in self._newest_first():
            if cls.name != class_name:
                continue
            if field in cls.fields:
                return cls.fields[field]
            if cls.base is not None:
                return self.get_field(cls.base.name, field)
        return None

    def create_instance(self, class_name: str) -> Instance:
        """Create an empty instance of the named class."""
        cls = self._find(class_name)
        if cls is None:
            print(f"[INSTANCE] Class not found: {class_name}")
            raise ClassNotFoundError(class_name)
        print(f"[INSTANCE] Created instance of: {class_name}")
        return Instance(cls, self)