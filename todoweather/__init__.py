"""Models, repositories and controllers for a to-do list and a weather forecast view."""

__version__ = "0.1.0"