"""
Construction de documents sans valeurs absentes

Un document est un dict ordonné qui ne contient jamais de None ni de
chaîne vide : l'ajout d'une telle valeur est simplement ignoré. Les
sous-documents et listes vides sont conservés, ils signifient
"demandé mais vide", à distinguer d'une clé absente ("non demandé").
"""

from typing import Any, Dict, Mapping, Optional


def _is_absent(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class NullAwareDocument:
    """
    Constructeur de document qui ignore les valeurs absentes

    Les dicts imbriqués ajoutés sont eux-mêmes filtrés, de même que
    les dicts contenus dans une liste.
    """

    def __init__(self):
        self._fields: Dict[str, Any] = {}

    @classmethod
    def wrap(cls, values: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Construit directement un document à partir d'un mapping

        Args:
            values: Valeurs brutes (peut être None)

        Returns:
            dict: Document filtré
        """
        builder = cls()
        for name, value in (values or {}).items():
            builder.add(name, value)
        return builder.build()

    def add(self, name: str, value: Any) -> 'NullAwareDocument':
        """
        Ajoute un champ au document, sauf si sa valeur est absente

        Args:
            name: Nom du champ
            value: Valeur scalaire, mapping ou liste

        Returns:
            NullAwareDocument: self, pour chaîner les appels
        """
        if _is_absent(value):
            return self

        if isinstance(value, Mapping):
            value = NullAwareDocument.wrap(value)
        elif isinstance(value, (list, tuple)):
            value = [
                NullAwareDocument.wrap(item) if isinstance(item, Mapping) else item
                for item in value
                if not _is_absent(item)
            ]

        self._fields[name] = value
        return self

    def build(self) -> Dict[str, Any]:
        """Retourne une copie indépendante du document construit"""
        return dict(self._fields)
