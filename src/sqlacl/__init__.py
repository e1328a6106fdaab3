"""sqlacl - SQL-style GRANT/DENY/REVOKE permission resolution."""

__version__ = "0.1.0"
