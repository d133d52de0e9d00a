"""
Domain Models for chess engine configurations

These are pure data models with no Streamlit or file IO dependencies.
An EngineConfiguration describes how to launch and talk to one external
engine; it round-trips through a plain dict for storage in settings files.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from . import option_factory
from .options import EngineOption

_log = logging.getLogger(__name__)

STANDARD_VARIANT = "standard"


class RestartMode(str, Enum):
    """Whether the engine process is restarted between games"""
    AUTO = "auto"   # protocol/application decides
    ON = "on"
    OFF = "off"


def _to_str(v: Any) -> str:
    if v is None or isinstance(v, (list, tuple, dict)):
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    return v if isinstance(v, str) else str(v)


def _to_str_list(v: Any) -> List[str]:
    if v is None:
        return []
    if isinstance(v, str):
        return [v]
    if not isinstance(v, (list, tuple)):
        return []
    return [_to_str(x) for x in v]


def _to_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() not in ("", "0", "false")
    return bool(v)


@dataclass(init=False)
class EngineConfiguration:
    """Launch and protocol settings for a single chess engine"""
    name: str
    command: str
    working_directory: str
    protocol: str
    arguments: List[str]
    init_strings: List[str]
    variants: List[str]
    white_eval_pov: bool
    restart_mode: RestartMode
    options: List[EngineOption]

    def __init__(self, name: str = "", command: str = "", protocol: str = "") -> None:
        self.name = name
        self.command = command
        self.working_directory = ""
        self.protocol = protocol
        self.arguments = []
        self.init_strings = []
        self.variants = [STANDARD_VARIANT]
        self.white_eval_pov = False
        self.restart_mode = RestartMode.AUTO
        self.options = []

    # --- (de)serialization -------------------------------------------------

    @classmethod
    def from_variant(
        cls, data: Dict[str, Any], diagnostics: Optional[List[str]] = None
    ) -> "EngineConfiguration":
        """
        Build a configuration from its dict form.

        Keys that are absent keep their defaults. Unknown restart values and
        option records the factory rejects are skipped; when `diagnostics` is
        given a message is appended for each of them. Never raises on bad data.
        """
        def note(msg: str) -> None:
            _log.debug(msg)
            if diagnostics is not None:
                diagnostics.append(msg)

        if not isinstance(data, dict):
            data = {}
        cfg = cls()
        cfg.name = _to_str(data.get("name"))
        cfg.command = _to_str(data.get("command"))
        cfg.working_directory = _to_str(data.get("workingDirectory"))
        cfg.protocol = _to_str(data.get("protocol"))

        if "initStrings" in data:
            cfg.set_init_strings(_to_str_list(data["initStrings"]))
        if "whitepov" in data:
            cfg.white_eval_pov = _to_bool(data["whitepov"])

        if "restart" in data:
            val = _to_str(data["restart"])
            try:
                cfg.restart_mode = RestartMode(val)
            except ValueError:
                note(f"{cfg.name}: ignoring unknown restart mode {val!r}")

        if "variants" in data:
            cfg.set_supported_variants(_to_str_list(data["variants"]))

        if "options" in data:
            records = data["options"] if isinstance(data["options"], list) else []
            for i, record in enumerate(records):
                option = option_factory.create(record) if isinstance(record, dict) else None
                if option is None:
                    note(f"{cfg.name}: skipping unrecognized option record #{i}")
                    continue
                cfg.add_option(option)
        return cfg

    def to_variant(self) -> Dict[str, Any]:
        """Dict form for storage; fields still at their default are left out."""
        data: Dict[str, Any] = {
            "name": self.name,
            "command": self.command,
            "workingDirectory": self.working_directory,
            "protocol": self.protocol,
        }
        if self.init_strings:
            data["initStrings"] = list(self.init_strings)
        if self.white_eval_pov:
            data["whitepov"] = True

        if self.restart_mode == RestartMode.ON:
            data["restart"] = "on"
        elif self.restart_mode == RestartMode.OFF:
            data["restart"] = "off"

        # Any list made only of "standard" (including an empty one) is the default.
        if self.variants.count(STANDARD_VARIANT) != len(self.variants):
            data["variants"] = list(self.variants)

        if self.options:
            data["options"] = [opt.to_variant() for opt in self.options]
        return data

    # --- mutators ------------------------------------------------------------

    def set_arguments(self, arguments: List[str]) -> None:
        self.arguments = list(arguments)

    def add_argument(self, argument: str) -> None:
        self.arguments.append(argument)

    def set_init_strings(self, init_strings: List[str]) -> None:
        self.init_strings = list(init_strings)

    def add_init_string(self, init_string: str) -> None:
        """Append `init_string`, one entry per line."""
        self.init_strings.extend(init_string.split("\n"))

    @property
    def supported_variants(self) -> List[str]:
        return self.variants

    def set_supported_variants(self, variants: List[str]) -> None:
        self.variants = list(variants)

    def set_options(self, options: List[EngineOption]) -> None:
        self.options = list(options)

    def add_option(self, option: EngineOption) -> None:
        assert option is not None, "add_option() requires an option"
        self.options.append(option)

    # --- copying -------------------------------------------------------------

    def assign(self, other: "EngineConfiguration") -> "EngineConfiguration":
        """Make this configuration a deep copy of `other`."""
        if other is self:
            return self
        self.name = other.name
        self.command = other.command
        self.protocol = other.protocol
        self.working_directory = other.working_directory
        self.set_arguments(other.arguments)
        self.set_init_strings(other.init_strings)
        self.set_supported_variants(other.variants)
        self.white_eval_pov = other.white_eval_pov
        self.restart_mode = other.restart_mode
        self.options = [opt.copy() for opt in other.options]
        return self

    def copy(self) -> "EngineConfiguration":
        return EngineConfiguration().assign(self)

    def __copy__(self) -> "EngineConfiguration":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "EngineConfiguration":
        return self.copy()

    def __str__(self) -> str:
        """Human-readable summary"""
        parts = [self.name or "(unnamed)"]
        if self.protocol:
            parts.append(self.protocol)
        if self.command:
            parts.append(self.command)
        return " • ".join(parts)
