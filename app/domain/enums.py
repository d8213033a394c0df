from enum import StrEnum, auto

class ErrorKind(StrEnum):
    INPUT = auto()
    ORACLE = auto()
    STORE = auto()
    CACHE = auto()
