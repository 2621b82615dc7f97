"""
Application Flask pour consulter les informations système

Routes :
- GET /api/platform : plateforme détectée
- GET /api/system : document des informations système
- GET /api/status : état de la façade
"""

import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from .. import __version__
from ..core.config import ProbeConfig
from ..core.exceptions import UnsupportedPlatformError
from ..core.logger import ProbeLogger
from ..core.system_info import SystemInfo


class SystemInfoWebApp:
    """
    Application web Flask pour sysprobe

    Cette classe encapsule l'application Flask et partage une seule
    instance de SystemInfo entre toutes les requêtes.
    """

    def __init__(self, config: Optional[ProbeConfig] = None, system_info: Optional[SystemInfo] = None):
        """
        Initialise l'application web

        Args:
            config: Instance de ProbeConfig (créée si absente)
            system_info: Façade à exposer (créée si absente)
        """
        self.config = config or ProbeConfig()

        self.logger = ProbeLogger(self.config)
        self.app_logger = self.logger.get_logger()

        self.system_info = system_info or SystemInfo(self.config, self.app_logger)

        self.app = Flask(__name__)
        # Conserver l'ordre des champs des documents
        self.app.json.sort_keys = False

        # Désactiver les logs Flask pour éviter la pollution
        logging.getLogger('werkzeug').setLevel(logging.ERROR)

        self._register_routes()

        self.app_logger.info("Interface web initialisée")

    def _serialization_config(self) -> Dict[str, Any]:
        """
        Options de sérialisation de la requête courante

        Les paramètres de la requête remplacent entièrement la section
        [json] de la configuration ; sans paramètre, elle s'applique.
        """
        if request.args:
            return request.args.to_dict()
        return self.config.get_serialization_config()

    def _register_routes(self):
        """Enregistre toutes les routes Flask"""

        @self.app.route('/api/platform')
        def api_platform():
            """Plateforme détectée, sans construire de capacité"""
            return jsonify({'platform': self.system_info.get_current_platform_enum().name})

        @self.app.route('/api/system')
        def api_system():
            """Document des informations système"""
            document = self.system_info.to_document(self._serialization_config())
            return jsonify(document)

        @self.app.route('/api/status')
        def api_status():
            """État de la façade"""
            return jsonify({
                'success': True,
                'version': __version__,
                'platform': self.system_info.get_current_platform_enum().name,
                'operating_system_loaded': self.system_info.is_operating_system_loaded(),
                'hardware_loaded': self.system_info.is_hardware_loaded()
            })

        @self.app.errorhandler(UnsupportedPlatformError)
        def handle_unsupported_platform(error):
            self.app_logger.error(f"Plateforme non supportée: {error}")
            return jsonify({'success': False, 'message': str(error)}), 500

    def run(self, host: Optional[str] = None, port: Optional[int] = None, debug: bool = False):
        """
        Lance le serveur web

        Args:
            host: Adresse d'écoute (configuration par défaut)
            port: Port d'écoute (configuration par défaut)
            debug: Mode debug Flask
        """
        web_config = self.config.get_web_config()
        host = host or web_config['host']
        port = port or web_config['port']

        self.app_logger.info(f"Démarrage de l'interface web sur http://{host}:{port}")
        self.app.run(host=host, port=port, debug=debug, use_reloader=False)


def create_app(config_path: Optional[str] = None) -> Flask:
    """
    Fonction factory pour créer l'application Flask

    Args:
        config_path: Chemin vers le fichier de configuration

    Returns:
        Flask: Application Flask configurée
    """
    web_app = SystemInfoWebApp(ProbeConfig(config_path))
    return web_app.app
