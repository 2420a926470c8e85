"""
docbot - Documentation Search Discord Bot

docbot answers slash-command questions by crawling official documentation
sites and replying with the most relevant excerpts.

Core Components:

- **Scraper**: Fetches a documentation root and every same-origin page it
  links to, concurrently and behind a configurable gate, then ranks the
  pages by how often they mention the query
- **Snippets**: Extracts the matching lines with surrounding context,
  skipping navigation boilerplate, bounded to a readable length
- **Commands**: ``/docs`` for backend languages and ``/frontenddocs`` for
  frontend topics, with optional forwarding to per-topic channels
- **Configuration**: YAML crawler settings and ``.env`` credentials

Usage:
    from docbot.main import main
    main()  # Starts the bot
"""
