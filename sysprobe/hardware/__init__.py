"""
Package matériel : interface de la couche d'abstraction matérielle
"""

from .base import HardwareAbstractionLayer

__all__ = ['HardwareAbstractionLayer']
