"""screens — Demo states driven by the pushdown machine.

Title --Switch--> MainMenu --Push--> Gameplay --Push--> PauseMenu
"""

from screens.title import TitleScreen
from screens.main_menu import MainMenu
from screens.gameplay import Gameplay
from screens.pause import PauseMenu

__all__ = ["TitleScreen", "MainMenu", "Gameplay", "PauseMenu"]
