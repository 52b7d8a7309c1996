"""Console front end."""
from sentiment.console.menus import ConsoleApp

__all__ = ["ConsoleApp"]
