"""Service layer — draft operations returning ServiceResult.

Services may import from domain, preview, config and infrastructure.
They must never import from commands or output.
"""
