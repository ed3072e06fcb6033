"""Service layer — manifest construction returning ServiceResult.

Services may import from validation.
They must never import from commands or output.
"""
