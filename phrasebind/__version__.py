"""Version information for phrasebind."""

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history
# 0.2.0 - Per-binding translator cache, scoped bindings, own phrase overrides
# 0.1.0 - Initial release: store, polyglot reducer, translate enhancer
