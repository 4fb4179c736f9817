"""Generate spreadsheet add-in wrapper code from annotated C++ interface headers, plus cell containers."""

__version__ = "0.1.0"