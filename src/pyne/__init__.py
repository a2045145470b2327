"""pyne: the text-editing core of a modal terminal editor."""

# keymaps pulls in actions and modes in dependency order
from . import keymaps as keymaps

__version__ = "0.1.0"

__all__ = ["__version__"]
