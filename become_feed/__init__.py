"""
Become.com Product Feed Generator

Modules:
    models   - Data models (catalog entities, FeedRow, FeedSettings)
    common   - Shared utilities (config loader, logging, text sanitizing)
    catalog  - Catalog reader interface and in-memory YAML-backed catalog
    feed     - Feed generation and file export
"""
