"""Root-level conftest.

Placing a conftest at the repository root keeps the root on
``sys.path``, so the ``tests.fixtures`` modules can be registered as
plugins. ``setup.py`` is excluded from doctest collection because
importing it would run the build.
"""

collect_ignore = ["setup.py"]
