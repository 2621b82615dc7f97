"""
Package de sérialisation pour sysprobe

Ce package projette le graphe d'objets en documents :
- Entités sérialisables (to_document / to_json)
- Constructeur de documents sans valeurs absentes
- Lecture tolérante des options d'inclusion
"""

from .document import NullAwareDocument
from .properties import get_boolean
from .serializable import SerializableEntity

__all__ = ['NullAwareDocument', 'get_boolean', 'SerializableEntity']
