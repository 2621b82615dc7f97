"""
Interface commune des entités sérialisables
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional


class SerializableEntity(ABC):
    """
    Entité projetable en document selon des options d'inclusion

    Les options reçues sont transmises sans modification aux entités
    possédées, qui y lisent leurs propres clés.
    """

    @abstractmethod
    def to_document(self, config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Projette l'entité en document

        Args:
            config: Options de sérialisation (clé -> booléen)

        Returns:
            dict: Document construit, sans valeurs absentes
        """
        pass

    def to_json(self, config: Optional[Mapping[str, Any]] = None, indent: Optional[int] = None) -> str:
        """Projette l'entité et la sérialise en JSON"""
        return json.dumps(self.to_document(config), indent=indent, ensure_ascii=False)
