"""
User-facing Discord presentation for docbot.

- **docs_embed.py**: Builds the reply embed for documentation lookups.
"""
