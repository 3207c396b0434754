"""Staff-only pages under ``/admin``."""
