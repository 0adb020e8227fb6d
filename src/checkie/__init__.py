"""checkie — a checkers engine with minimax and alpha-beta agents."""

__version__ = "0.1.0"
