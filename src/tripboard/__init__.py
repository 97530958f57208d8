"""Trip Board: a filtered, sortable board of trip points."""
__version__ = "0.1.0"
