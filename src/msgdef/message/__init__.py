"""Message keys, placeholders and default-message definition.

Submodules:
    output      - Text, Translatable (the values produced by keys and placeholders)
    placeholder - Placeholder and Babel-backed placeholder factories
    key         - MessageKey, Arg1 .. Arg5 and their factory functions
    definer     - DefaultMessageDefiner (key -> default text registry)

Python 3.13+.
"""

from msgdef.message import placeholder
from msgdef.message.definer import DefaultMessageDefiner
from msgdef.message.key import (
    Arg1,
    Arg2,
    Arg3,
    Arg4,
    Arg5,
    MessageKey,
    arg1,
    arg2,
    arg3,
    arg4,
    arg5,
    key,
)
from msgdef.message.output import Output, OutputLike, Text, Translatable, as_output
from msgdef.message.placeholder import Placeholder

__all__ = [
    "Arg1",
    "Arg2",
    "Arg3",
    "Arg4",
    "Arg5",
    "DefaultMessageDefiner",
    "MessageKey",
    "Output",
    "OutputLike",
    "Placeholder",
    "Text",
    "Translatable",
    "arg1",
    "arg2",
    "arg3",
    "arg4",
    "arg5",
    "as_output",
    "key",
    "placeholder",
]
