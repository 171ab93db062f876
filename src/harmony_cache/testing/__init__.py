"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["harmony_cache.testing.fixtures"]
"""

from harmony_cache.testing.fakes import FakeClock, FakeMetricsRegistry

__all__ = ["FakeClock", "FakeMetricsRegistry"]
