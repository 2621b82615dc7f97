"""
Package logiciel : interface des systèmes d'exploitation
"""

from .base import OperatingSystem

__all__ = ['OperatingSystem']
