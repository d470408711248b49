# code/fxmanifest/__init__.py
"""
Générateur de fxmanifest.lua pour les ressources FiveM.

Modules principaux :
- main.py: Point d'entrée et orchestration.
- cli.py: Interface en ligne de commande.
- classifier.py: Classement d'un chemin (script client/serveur/partagé, ui_page, fichier).
- dependencies.py: Extraction des déclarations `dependency '...'` des scripts.
- scanner.py: Parcours du dossier et modèle FileCategories.
- manifest_io.py: Rendu et écriture du manifeste.
- config_loader.py / global_config.py: Configuration (config.yaml, .env).
- lib/: Sous-package pour les utilitaires partagés par ce tool.
"""

__version__ = "1.0.0"
