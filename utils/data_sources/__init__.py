"""
Data source adapters.
"""
from utils.data_sources.base import BaseDataSource
from utils.data_sources.json_source import JsonDataSource
from utils.data_sources.rss_source import RssDataSource

__all__ = ["BaseDataSource", "JsonDataSource", "RssDataSource"]
