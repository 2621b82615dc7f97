"""
Point d'entrée en ligne de commande de sysprobe

Modes de fonctionnement :
- dump : affiche le document JSON des informations système
- platform : affiche la plateforme détectée
- web : lance l'interface web Flask
"""

import sys
import argparse
from typing import Dict, List, Optional

from .core.config import ProbeConfig, create_default_config
from .core.exceptions import UnsupportedPlatformError
from .core.logger import ProbeLogger
from .core.system_info import SystemInfo


def build_serialization_config(config: ProbeConfig, include: Optional[str] = None) -> Dict[str, str]:
    """
    Détermine les options de sérialisation à appliquer

    Args:
        config: Configuration chargée
        include: Liste de clés séparées par des virgules (remplace la section [json])

    Returns:
        dict: Options de sérialisation
    """
    if include is None:
        return config.get_serialization_config()

    keys = [key.strip() for key in include.split(',') if key.strip()]
    return {key: 'true' for key in keys}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Point d'entrée principal avec gestion des arguments de ligne de commande
    """
    parser = argparse.ArgumentParser(
        description='sysprobe - Informations matériel et système multi-plateforme'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Chemin vers le fichier de configuration'
    )

    parser.add_argument(
        '--mode', '-m',
        choices=['dump', 'platform', 'web'],
        default='dump',
        help='Mode de fonctionnement'
    )

    parser.add_argument(
        '--include', '-i',
        type=str,
        help='Clés de sérialisation à inclure, séparées par des virgules (ex: platform,hardware,hardware.memory)'
    )

    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help='Indentation du JSON produit'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Fichier de sortie pour le document (mode dump)'
    )

    parser.add_argument('--host', type=str, help='Adresse d\'écoute (mode web)')
    parser.add_argument('--port', type=int, help='Port d\'écoute (mode web)')

    parser.add_argument(
        '--create-config',
        action='store_true',
        help='Crée un fichier de configuration par défaut'
    )

    parser.add_argument(
        '--validate-config',
        action='store_true',
        help='Valide la configuration actuelle'
    )

    args = parser.parse_args(argv)

    if args.create_config:
        if not args.config:
            print("❌ --config est requis avec --create-config", file=sys.stderr)
            return 1
        try:
            create_default_config(args.config)
        except OSError as e:
            print(f"❌ Erreur création configuration: {e}", file=sys.stderr)
            return 1
        print(f"✅ Configuration par défaut créée: {args.config}")
        return 0

    config = ProbeConfig(args.config)

    if args.validate_config:
        if config.validate():
            print("✅ Configuration valide")
            return 0
        print("❌ Configuration invalide")
        return 1

    logger = ProbeLogger(config)

    if args.mode == 'web':
        from .web.app import SystemInfoWebApp

        logger.log_system_info()
        try:
            SystemInfoWebApp(config).run(host=args.host, port=args.port)
        except KeyboardInterrupt:
            print("\n🛑 Arrêt demandé par l'utilisateur", file=sys.stderr)
        return 0

    system_info = SystemInfo(config, logger.get_logger())

    if args.mode == 'platform':
        print(system_info.get_current_platform_enum().name)
        return 0

    try:
        document = system_info.to_json(build_serialization_config(config, args.include), indent=args.indent)
    except UnsupportedPlatformError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(document)
        except OSError as e:
            print(f"❌ Erreur écriture document: {e}", file=sys.stderr)
            return 1
        print(f"✅ Document sauvegardé dans: {args.output}")
    else:
        print(document)

    return 0


if __name__ == '__main__':
    sys.exit(main())
