"""
Smokefield - ambient smoke/sparkle hero effect and loan calculator
"""

__version__ = "0.1.0"
