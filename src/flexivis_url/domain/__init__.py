"""Domain layer — layout trees, compilation, encoding, URL assembly.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
