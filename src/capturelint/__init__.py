"""capturelint - flags Swift closures that capture self without declaring it."""

__version__ = "0.1.0"
