"""
MyDay todo storage.

Monthly todo persistence, legacy text migration and display ordering for
the My Day todo list.
"""

__version__ = "1.0.0"
