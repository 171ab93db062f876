"""
harmony_cache – in-process read cache for the hospital-management backend.

Import path convention::

    from harmony_cache.application.cache import TagIndexedCache, CacheTag
    from harmony_cache.application.cache import CacheRegistry, CacheInvalidator
    from harmony_cache.config.settings import CacheSettings, EnvSettingsLoader
    from harmony_cache.kernel.errors import NotFoundError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
