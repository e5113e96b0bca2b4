"""
Services package - Business logic layer.
"""

from .search_service import ActivitySearchService, get_search_service

__all__ = ['ActivitySearchService', 'get_search_service']
