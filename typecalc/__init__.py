"""Calculator with selectable number types: floating point, fixed-width integers and exact fractions."""

__version__ = "1.0.0"
__all__ = ["calculator", "controller", "mainwindow", "numtypes", "rational"]