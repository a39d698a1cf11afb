"""
Console front end for the support desk.

- ConsoleMenu: interactive text menus (nested or flat layout)
- run_support_demo: scripted walk-through of a typical support flow
"""

from console.menu import ConsoleMenu
from console.demo import run_support_demo

__all__ = [
    "ConsoleMenu",
    "run_support_demo",
]
