from .ownership import check_ownership, ensure_ownership

__all__ = ["check_ownership", "ensure_ownership"]
