#!/usr/bin/env python3
# code/fxmanifest/main.py
"""
Point d'entrée principal du générateur de fxmanifest.
Enchaîne : résolution du dossier cible -> scan -> résumé -> rendu
(écriture de fxmanifest.lua ou affichage en mode --dry-run).
"""
import sys
from pathlib import Path
import argparse
from typing import Callable, List, Optional
import logging

from . import cli as manifest_cli
from . import config_loader
from . import manifest_io
from .errors import ConfigurationError
from .lib import utils as shared_utils
from .scanner import FileCategories, scan_directory

logger = logging.getLogger(__name__)

BANNER = "FiveM FXManifest Generator"


def prompt_for_directory(input_func: Optional[Callable[[str], str]] = None) -> str:
    return (input_func or input)("Enter the resource folder path: ").strip()


def resolve_target_directory(path_str: str) -> Path:
    """Retourne le chemin absolu du dossier cible ou lève ConfigurationError."""
    if not path_str:
        raise ConfigurationError("No resource folder path given!")
    directory = Path(path_str).expanduser()
    if not directory.exists():
        raise ConfigurationError("Directory does not exist!")
    if not directory.is_dir():
        raise ConfigurationError("Path is not a directory!")
    return directory.resolve()


def warn_missing_buckets(categories: FileCategories) -> List[str]:
    warnings = []
    if not categories.client_scripts:
        warnings.append("No client scripts found!")
    if not categories.server_scripts:
        warnings.append("No server scripts found!")
    for message in warnings:
        logger.warning(message)
    return warnings


def print_summary(categories: FileCategories):
    counts = categories.counts()
    print("\nSummary:")
    print(f"  Client scripts: {counts['client_scripts']}")
    print(f"  Server scripts: {counts['server_scripts']}")
    print(f"  Shared scripts: {counts['shared_scripts']}")
    print(f"  UI pages: {counts['ui_pages']}")
    print(f"  Files: {counts['files']}")
    print(f"  Dependencies: {counts['dependencies']}")


def _printable(text: str) -> str:
    # Noms non UTF-8 (surrogateescape) : affichés avec un caractère de remplacement
    return text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def _print_found(relative_path: str):
    print(f"[Found] {_printable(relative_path)}")


def run_manifest_generation_workflow(directory: Path, args: argparse.Namespace) -> bool:
    """
    Workflow principal pour la génération du manifeste.
    1. Scanne le dossier de la ressource.
    2. Affiche le résumé et les avertissements.
    3. Écrit fxmanifest.lua (ou l'affiche si --dry-run).
    """
    config = config_loader.get_manifest_config()
    manifest_filename = config["manifest_filename"]

    shared_utils.print_stage_header("Étape 1: Scan du dossier")
    print("\nScanning directory...")
    categories = scan_directory(
        directory,
        reserved_names=config_loader.reserved_manifest_names(config),
        on_file=_print_found if args.verbose else None,
    )

    warn_missing_buckets(categories)
    print_summary(categories)

    shared_utils.print_stage_header("Étape Finale: Rendu du Manifeste")
    print(f"\nGenerating {manifest_filename}...")
    document = manifest_io.render_manifest(categories, directory.name, header=config)

    if args.dry_run:
        logger.info("Mode --dry-run: le manifeste est affiché, aucun fichier écrit.")
        manifest_io.write_manifest(document, sys.stdout)
        return True

    output_path = directory / manifest_filename
    if not manifest_io.save_manifest(document, output_path):
        print(f"Error: Could not create {manifest_filename}", file=sys.stderr)
        return False
    print(f"\n{manifest_filename} generated successfully at: {_printable(str(output_path))}")
    return True


def wait_for_exit(args: argparse.Namespace):
    if args.dry_run or args.no_pause or not sys.stdin.isatty():
        return
    try:
        input("\nPress Enter to exit...")
    except (EOFError, KeyboardInterrupt):
        pass


def manifest_tool_main(argv: List[str] = None) -> int:
    """Fonction principale de l'outil. Retourne le code de sortie."""
    args = manifest_cli.parse_arguments(argv)
    shared_utils.setup_logging(debug_mode=args.debug, log_file=args.log_file)

    print(BANNER)
    print("=" * len(BANNER) + "\n")

    path_str = args.path
    if not path_str:
        try:
            path_str = prompt_for_directory()
        except (EOFError, KeyboardInterrupt):
            print(file=sys.stderr)
            path_str = ""

    try:
        directory = resolve_target_directory(path_str)
    except ConfigurationError as e:
        logger.error(f"Dossier cible invalide '{path_str}': {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Lancement du générateur (dry_run={args.dry_run}, verbose={args.verbose}) sur {directory}")
    if not run_manifest_generation_workflow(directory, args):
        logger.error("La génération du manifeste A ÉCHOUÉ (voir logs pour détails).")
        return 1

    wait_for_exit(args)
    return 0


def run():
    sys.exit(manifest_tool_main())


if __name__ == "__main__":
    run()
