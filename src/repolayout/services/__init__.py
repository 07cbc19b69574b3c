"""Service layer — registry, resolution, and ServiceResult-returning services.

Services may import from the domain layer.
They must never import from commands or output.
"""
