from .authors import load_author_summaries

__all__ = ["load_author_summaries"]
