"""socialgraph — friendship graph loader and connection finder."""

__version__ = "0.1.0"
