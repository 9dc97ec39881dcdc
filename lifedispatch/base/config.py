import dataclasses
import os

from typing import Optional

DEFAULT_ASSET_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "assets")
DEFAULT_PLACEHOLDER = "{PLACEHOLDER}"

DEBUG_SHADER_ENV = "DEBUG_SHADER"
ASSET_ROOT_ENV = "LIFEDISPATCH_ASSET_ROOT"

_false_strings = ("", "0", "false", "no", "off")

def env_flag(value: Optional[str]) -> bool:
    """
    Interpret an environment variable as a flag. Unset, empty and the usual
    spellings of "false" turn the flag off, anything else turns it on.
    """
    if value is None:
        return False

    return value.strip().lower() not in _false_strings

@dataclasses.dataclass
class AssemblerConfig:
    """
    A dataclass holding everything the shader assembler would otherwise look
    up globally.

    Attributes:
        asset_root (str): The directory templates and imports are read from.
        debug_shader (bool): Write every resolved shader next to its template
            as `<template>.debug.<ext>`.
        placeholder (str): The token replaced by compiled rule code.
    """
    asset_root: str = DEFAULT_ASSET_ROOT
    debug_shader: bool = False
    placeholder: str = DEFAULT_PLACEHOLDER

    @classmethod
    def from_environment(cls, asset_root: Optional[str] = None) -> "AssemblerConfig":
        """
        Build a config from the process environment. `DEBUG_SHADER` turns on
        the debug dump and `LIFEDISPATCH_ASSET_ROOT` overrides the packaged
        assets. An explicit `asset_root` argument wins over both.
        """

        if asset_root is None:
            asset_root = os.environ.get(ASSET_ROOT_ENV, DEFAULT_ASSET_ROOT)

        return cls(
            asset_root=asset_root,
            debug_shader=env_flag(os.environ.get(DEBUG_SHADER_ENV)),
        )
