# code/fxmanifest/cli.py
import argparse
from typing import List, Optional

from . import global_config


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse les arguments de la ligne de commande du générateur de fxmanifest.
    Le dossier cible est optionnel : s'il est absent, main.py le demande à l'utilisateur.
    """
    parser = argparse.ArgumentParser(
        prog="fxmanifest",
        description="Génère le fxmanifest.lua d'une ressource FiveM à partir du contenu de son dossier.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exemples d'utilisation:
  Générer le manifeste d'une ressource:
    fxmanifest resources/[local]/my_resource

  Afficher le manifeste sans écrire de fichier:
    fxmanifest resources/my_resource --dry-run

  Lister chaque fichier trouvé et activer les logs de débogage:
    fxmanifest resources/my_resource --verbose --debug
"""
    )

    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        metavar="RESOURCE_DIR",
        help="Dossier racine de la ressource. Demandé interactivement si absent."
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Affiche le manifeste dans la console au lieu d'écrire fxmanifest.lua."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Affiche le chemin relatif de chaque fichier trouvé pendant le scan."
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Ne pas attendre Entrée avant de quitter après l'écriture du manifeste."
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Active les logs de débogage détaillés."
    )
    parser.add_argument(
        "--log-file",
        default=global_config.DEFAULT_LOG_FILE,
        metavar="FILE_PATH",
        help="Fichier de log optionnel (Défaut: $FXMANIFEST_LOG_FILE, sinon aucun)."
    )
    return parser.parse_args(argv)
