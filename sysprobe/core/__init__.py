"""
Module Core - Composants principaux de sysprobe

Ce module contient les fonctionnalités de base :
- Détection de la plateforme
- Façade SystemInfo (construction paresseuse et partagée)
- Configuration
- Logging
"""
