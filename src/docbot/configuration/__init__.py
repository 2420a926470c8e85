"""
Configuration management for docbot.

- **app_configuration.py**: fcntl-locked YAML loader for global settings
  (crawler concurrency and timeouts, bot presence). Falls back to defaults
  on missing or malformed config files.

- **crawler_settings.py**: Typed accessors for the ``crawler`` block.

- **doc_sources.py**: Immutable topic tables mapping each supported
  documentation topic to its site, embed thumbnail and forward channel.
"""
