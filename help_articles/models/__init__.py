from help_articles.models.article import CachedArticle
from help_articles.models.metadata import CacheMetadata

__all__ = ["CachedArticle", "CacheMetadata"]
