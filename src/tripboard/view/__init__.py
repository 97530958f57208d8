"""
The VIEW layer. ``base`` holds the Qt-free contracts used by the controllers;
everything else is PySide6 and is only imported by the application shell.
"""
