"""
Data access layer for the league stats engine

HTTP client for the static data files and scoresheet exports.
"""
from .client import DataClient, get_data_client, get_global_client, cleanup_global_client

__all__ = ['DataClient', 'get_data_client', 'get_global_client', 'cleanup_global_client']
