"""
Engine option types.

An option is a named, typed engine setting (hash size, threads, an opening
book path...). Each option knows how to validate a value, serialize itself to
a plain dict and clone itself. Options are plain values: configurations own
their option instances and never share them.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List


class TextEditType(str, Enum):
    """How a text option's value is edited by the user"""
    TEXT = "text"
    FILE = "file"
    FOLDER = "folder"


@dataclass
class EngineOption:
    """Base option: name, current value, default value and optional alias"""
    name: str
    value: Any = None
    default_value: Any = None
    alias: str = ""

    type_name = ""

    def is_valid(self) -> bool:
        return bool(self.name) and self.is_valid_value(self.value)

    def is_valid_value(self, value: Any) -> bool:
        return True

    def _extra_variant(self) -> Dict[str, Any]:
        return {}

    def to_variant(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "type": self.type_name}
        if self.value is not None:
            data["value"] = self.value
        if self.default_value is not None:
            data["default"] = self.default_value
        if self.alias:
            data["alias"] = self.alias
        data.update(self._extra_variant())
        return data

    def copy(self) -> "EngineOption":
        # dataclasses.replace builds a fresh instance; list fields are re-copied
        # by the subclasses that carry them.
        return replace(self)


@dataclass
class CheckOption(EngineOption):
    type_name = "check"

    def is_valid_value(self, value: Any) -> bool:
        return isinstance(value, bool)


@dataclass
class SpinOption(EngineOption):
    min: int = 0
    max: int = 0

    type_name = "spin"

    def is_valid_value(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.min <= self.max and self.min <= value <= self.max

    def _extra_variant(self) -> Dict[str, Any]:
        return {"min": self.min, "max": self.max}


@dataclass
class ComboOption(EngineOption):
    choices: List[str] = field(default_factory=list)

    type_name = "combo"

    def is_valid_value(self, value: Any) -> bool:
        return isinstance(value, str) and value in self.choices

    def _extra_variant(self) -> Dict[str, Any]:
        return {"choices": list(self.choices)}

    def copy(self) -> "ComboOption":
        return replace(self, choices=list(self.choices))


@dataclass
class TextOption(EngineOption):
    edit_type: TextEditType = TextEditType.TEXT

    @property
    def type_name(self) -> str:  # type: ignore[override]
        return self.edit_type.value

    def is_valid_value(self, value: Any) -> bool:
        return isinstance(value, str)


@dataclass
class ButtonOption(EngineOption):
    """Stateless action (e.g. "Clear Hash"); carries no value"""
    type_name = "button"

    def is_valid(self) -> bool:
        return bool(self.name)
