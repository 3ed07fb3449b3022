"""Root conftest: load the paramcheck pytest plugin from source.

The pytest11 entry point is disabled in addopts (-p no:paramcheck)
so the plugin is registered exactly once.
"""

pytest_plugins = ["paramcheck.presentation.pytest_plugin"]
