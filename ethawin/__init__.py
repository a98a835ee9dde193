"""Text-mode windowing toolkit with menus, dialogs and sample programs."""

__version__ = "1.0.0"