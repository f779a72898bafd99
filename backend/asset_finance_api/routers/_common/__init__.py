"""
Common helpers shared by routers.
"""

from .path_params import path_ids

__all__ = ["path_ids"]
