"""
Catalog gateway: cached backend-for-frontend over the video catalog REST API.
"""

__version__ = "1.0.0"
