"""Domain layer: document types, naming rules, and frontmatter.

This layer depends only on stdlib, pydantic, and ruamel.yaml.
It must never import from services, infrastructure, commands, or config.
"""
