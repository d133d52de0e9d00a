"""
Builds engine options from their serialized dict form.

Records come from settings files written by older or newer versions of the
application, so anything unrecognized yields None instead of an error.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .options import (
    ButtonOption, CheckOption, ComboOption, EngineOption, SpinOption, TextEditType, TextOption,
)

_log = logging.getLogger(__name__)


class OptionRecord(BaseModel):
    """Shape of a serialized option; unknown keys are tolerated"""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    type: str = ""
    value: Any = None
    default: Any = None
    alias: str = ""
    min: int = 0
    max: int = 0
    choices: List[str] = []


def _build(rec: OptionRecord) -> Optional[EngineOption]:
    default = rec.default if rec.default is not None else rec.value
    if rec.type == "check":
        return CheckOption(rec.name, rec.value, default, rec.alias)
    if rec.type == "spin":
        return SpinOption(rec.name, rec.value, default, rec.alias, min=rec.min, max=rec.max)
    if rec.type == "combo":
        return ComboOption(rec.name, rec.value, default, rec.alias, choices=list(rec.choices))
    if rec.type in ("text", "file", "folder"):
        return TextOption(rec.name, rec.value, default, rec.alias, edit_type=TextEditType(rec.type))
    if rec.type == "button":
        return ButtonOption(rec.name, alias=rec.alias)
    return None


def create(record: Dict[str, Any]) -> Optional[EngineOption]:
    """Return a new option for `record`, or None if it is not a valid option."""
    try:
        rec = OptionRecord.model_validate(record)
    except ValidationError as e:
        _log.debug("Rejected option record %r: %s", record, e)
        return None

    option = _build(rec)
    if option is None:
        _log.debug("Unknown option type %r for option %r", rec.type, rec.name)
        return None
    if not option.is_valid():
        _log.debug("Invalid option %r (value %r)", rec.name, rec.value)
        return None
    return option
