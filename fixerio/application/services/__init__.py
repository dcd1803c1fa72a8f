from .sync_api import SyncApi

__all__ = ['SyncApi']
