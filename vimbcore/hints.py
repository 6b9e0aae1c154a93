"""Parsing of hint mode prompts such as ';o' or 'g;t'."""

from __future__ import annotations

from dataclasses import dataclass

_MODES_WITH_QUEUE = "eiIoOpPstTxyY"
_G_MODES_WITH_QUEUE = "IpPstyY"
_MODES = "eiIoOstTxyY"
_G_MODES = "IstyY"


@dataclass(frozen=True)
class HintPrompt:
    """A valid hint prompt.

    mode is the mode char, gmode tells whether the prompt was a 'g;X' one,
    and filter is whatever text follows the prompt.
    """

    mode: str
    gmode: bool
    filter: str = ""

    @property
    def prompt_length(self) -> int:
        """Number of chars the prompt itself takes up."""
        return 3 if self.gmode else 2


def parse_hint_prompt(prompt: str | None, queue: bool = True) -> HintPrompt | None:
    """Parse a hint prompt, which may have more text after it.

    Return None if the prompt does not belong to a known hint mode. When
    queue is false, the queue modes 'p' and 'P' are not accepted.
    """
    if not prompt:
        return None

    if prompt[0] == ";":
        pmode = prompt[1:2]
    elif prompt[0] == "g" and len(prompt) >= 3:
        pmode = prompt[2]
    else:
        pmode = ""

    if not pmode:
        return None

    gmode = prompt[0] == "g"
    if gmode:
        allowed = _G_MODES_WITH_QUEUE if queue else _G_MODES
    else:
        allowed = _MODES_WITH_QUEUE if queue else _MODES
    if pmode not in allowed:
        return None

    length = 3 if gmode else 2
    return HintPrompt(pmode, gmode, prompt[length:])