from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import Annotated, List, Literal, Union


class OptionToken(BaseModel):
    """
    An argument starting with one of the configured prefixes.

    The name is whatever follows the prefix, including any ``=value``
    suffix; interpreting it is left to the caller.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["option"] = "option"
    idx: int  # Position in the original command line arguments
    prefix: str
    name: str

    @property
    def index(self) -> int:
        return self.idx

    def __str__(self) -> str:
        return self.prefix + self.name


class OptionsArgumentsSeparatorToken(BaseModel):
    """
    The separator between options and arguments (e.g. ``--``).
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["separator"] = "separator"
    idx: int
    separator: str

    @property
    def index(self) -> int:
        return self.idx

    def __str__(self) -> str:
        return self.separator


class PositionalArgumentToken(BaseModel):
    """
    Any argument that is neither an option nor the separator.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["positional"] = "positional"
    idx: int
    value: str

    @property
    def index(self) -> int:
        return self.idx

    def __str__(self) -> str:
        return self.value


Token = Annotated[
    Union[OptionToken, OptionsArgumentsSeparatorToken, PositionalArgumentToken],
    Field(discriminator="kind"),
]

# Validates/serializes whole token lists (e.g. the CLI's --json output)
TokenList = TypeAdapter(List[Token])
