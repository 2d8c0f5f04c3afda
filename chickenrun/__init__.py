"""An endless-runner arcade game about a chicken jumping over obstacles."""

__version__ = "0.1.0"