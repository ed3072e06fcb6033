"""riff — composable validators for Click commands, and a CLI built on them."""

__version__ = "0.1.0"
