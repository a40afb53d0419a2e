from .fetcher import DownstreamFetcher

__all__ = ["DownstreamFetcher"]
