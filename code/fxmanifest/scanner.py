# code/fxmanifest/scanner.py
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Set
import logging

from . import classifier
from . import config_loader
from .dependencies import extract_dependencies

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())  # Evite msg si non configuré


class FileCategories:
    """
    Résultat d'un scan : chemins relatifs (séparateur '/') rangés par catégorie,
    plus l'ensemble des dépendances déclarées dans les scripts.
    Une page HTML figure à la fois dans ui_pages et dans files.
    """

    def __init__(self):
        self.client_scripts: List[str] = []
        self.server_scripts: List[str] = []
        self.shared_scripts: List[str] = []
        self.files: List[str] = []
        self.ui_pages: List[str] = []
        self.dependencies: Set[str] = set()

    def add(self, relative_path: str, category: str):
        if category == classifier.CLIENT_SCRIPT:
            self.client_scripts.append(relative_path)
        elif category == classifier.SERVER_SCRIPT:
            self.server_scripts.append(relative_path)
        elif category == classifier.SHARED_SCRIPT:
            self.shared_scripts.append(relative_path)
        elif category == classifier.UI_PAGE:
            self.ui_pages.append(relative_path)
            self.files.append(relative_path)
        elif category == classifier.ASSET:
            self.files.append(relative_path)

    def counts(self) -> Dict[str, int]:
        return {
            "client_scripts": len(self.client_scripts),
            "server_scripts": len(self.server_scripts),
            "shared_scripts": len(self.shared_scripts),
            "ui_pages": len(self.ui_pages),
            "files": len(self.files),
            "dependencies": len(self.dependencies),
        }


def iter_resource_files(root_dir: Path) -> Iterable[Path]:
    """Parcourt récursivement root_dir (ordre trié, liens de dossiers non suivis)."""
    for dirpath, dirnames, filenames in os.walk(root_dir):
        dirnames.sort()
        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename
            if file_path.is_file():
                yield file_path


def read_script_dependencies(script_path: Path) -> Set[str]:
    try:
        with open(script_path, 'r', encoding='utf-8', errors='ignore') as f:
            return extract_dependencies(f)
    except OSError as e:
        logger.debug(f"Lecture impossible de {script_path} pour les dépendances, ignoré: {e}")
        return set()


def scan_directory(root_dir: Path,
                   reserved_names: Optional[Iterable[str]] = None,
                   on_file: Optional[Callable[[str], None]] = None) -> FileCategories:
    """
    Scanne root_dir et retourne les fichiers classés.

    Args:
        root_dir: Racine de la ressource.
        reserved_names: Noms de manifestes existants à ignorer (insensible à la casse).
        on_file: Appelé avec le chemin relatif de chaque fichier retenu (mode verbeux).
    """
    root_dir = Path(root_dir)
    if reserved_names is None:
        reserved_names = config_loader.reserved_manifest_names(config_loader.DEFAULT_CONFIG)
    reserved = {name.lower() for name in reserved_names}
    categories = FileCategories()
    logger.info(f"Scan du répertoire: {root_dir}")

    for file_path in iter_resource_files(root_dir):
        if file_path.name.lower() in reserved:
            logger.debug(f"Manifeste existant ignoré: {file_path}")
            continue
        relative_path = file_path.relative_to(root_dir).as_posix()
        category = classifier.classify(relative_path)
        categories.add(relative_path, category)
        if classifier.is_script(category):
            categories.dependencies |= read_script_dependencies(file_path)
        logger.debug(f"{relative_path} -> {category}")
        if on_file:
            on_file(relative_path)

    logger.info(f"Scan terminé: {categories.counts()}")
    return categories
