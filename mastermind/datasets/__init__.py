from .validator import validate_secrets, pretty_summary
from .io import read_secrets, write_secrets

__all__ = ["validate_secrets", "pretty_summary", "read_secrets", "write_secrets"]
