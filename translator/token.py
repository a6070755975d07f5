from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from translator.type import Type
from translator.util import Span


@dataclass(frozen=True)
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, compare=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            object.__setattr__(self, "type", Type.to_type(self.type))

    @classmethod
    def of(cls, type: Type, span: Optional[Span] = None) -> Token:
        # Tokens whose text is simply their kind, e.g. ';' or 'EOF'
        return cls(type.value, type, span or Span.default())

    def matches(self, other: Token) -> bool:
        return self.type == other.type

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        return self.text == __o.text and self.type == __o.type

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text
