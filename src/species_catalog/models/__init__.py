# ABOUTME: Domain models for species catalog records
# ABOUTME: Validation schema shared by the add and edit flows

from .species import Kingdom, SpeciesDraft

__all__ = ["Kingdom", "SpeciesDraft"]
