"""Command-driven simulator of the Arachnopod robot's control modules: power and drive subsystems, command routing and logging."""

__version__ = "0.1.0"