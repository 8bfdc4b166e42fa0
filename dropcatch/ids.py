"""Identifiers for textures, game states and button colour states."""

from enum import IntEnum


class TextureId(IntEnum):
    """Textures loaded by the game."""

    UNDEFINED = -1
    BUTTON_START = 0
    BUTTON_EXIT = 1
    BUTTON_CONTINUE = 2
    CIRCLE = 3
    BOX = 4


class StateId(IntEnum):
    """States that can be pushed onto the state stack."""

    UNDEFINED = -1
    MENU_MAIN = 0
    MENU_IN_GAME = 1
    GAME = 2
    GAME_OVER = 3


class ColorState(IntEnum):
    """Visual states of a button, each with its own colour."""

    UNDEFINED = -1
    DEFAULT = 0
    HOVERED = 1
    ACTIVE = 2