from enum import Enum


class Type(Enum):
    EQ = "="
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LRB = "("
    RRB = ")"
    SEMICOLON = ";"
    NUM = "num"
    ID = "id"
    EOF = "EOF"
    ANY = "ANY"
    EMPTY = "EMPTY"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.ID:
                return "variable"
            case Type.NUM:
                return "number"
            case Type.EOF:
                return "end of input"
            case Type.ANY:
                return "token"
            case Type.EMPTY:
                return "nothing"
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.EOF:
                return f"the {self}"
            case Type.ANY:
                return f"any {self}"
            case Type.EMPTY:
                return str(self)
            case _:
                return f"a {self}"
