"""
Package interface web pour sysprobe

Ce package fournit une application Flask locale permettant
de consulter les informations système au format JSON.
"""
