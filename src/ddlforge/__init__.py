"""ddlforge — dialect-aware DDL generation from vendor-neutral statements."""

__version__ = "0.1.0"
