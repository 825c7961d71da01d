"""Logical input keys, independent of the terminal library."""

from enum import Enum


class Key(str, Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    TAB = "tab"
    QUIT = "q"
    REPOSITORIES = "r"
    UPDATE = "u"
    OVERVIEW = "o"
    TOP = "t"
    YES = "y"
    NO = "n"
