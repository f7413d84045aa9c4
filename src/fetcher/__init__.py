from .repository_fetcher import RepositoryFetcher, FetchResult

__all__ = ['RepositoryFetcher', 'FetchResult']
