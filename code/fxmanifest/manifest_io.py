# code/fxmanifest/manifest_io.py
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, TextIO
import logging

from .config_loader import DEFAULT_CONFIG
from .errors import OutputError
from .scanner import FileCategories

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())  # Evite msg si non configuré

INDENT = "    "

HEADER_KEYS = ("fx_version", "game", "author", "version")
DEFAULT_HEADER = {key: DEFAULT_CONFIG[key] for key in HEADER_KEYS}


def _render_block(key: str, paths: List[str]) -> str:
    lines = [f"{key} {{"]
    lines.extend(f"{INDENT}'{path}'," for path in paths)
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_manifest(categories: FileCategories, resource_name: str,
                    header: Optional[Dict[str, Any]] = None) -> str:
    """
    Construit le texte complet du fxmanifest.lua.

    Chaque liste est triée ; les blocs vides sont omis. Ordre des blocs :
    shared_scripts, client_scripts, server_scripts, ui_page, files.
    """
    header = {**DEFAULT_HEADER, **(header or {})}
    out = [
        f"fx_version '{header['fx_version']}'\n",
        f"game '{header['game']}'\n\n",
        f"author '{header['author']}'\n",
        f"description '{resource_name}'\n",
        f"version '{header['version']}'\n\n",
    ]

    if categories.dependencies:
        for dep in sorted(categories.dependencies):
            out.append(f"dependency '{dep}'\n")
        out.append("\n")

    blocks = [
        ("shared_scripts", sorted(categories.shared_scripts)),
        ("client_scripts", sorted(categories.client_scripts)),
        ("server_scripts", sorted(categories.server_scripts)),
        ("ui_page", sorted(categories.ui_pages)),
    ]
    for key, paths in blocks:
        if paths:
            out.append(_render_block(key, paths) + "\n")
    files = sorted(categories.files)
    if files:
        out.append(_render_block("files", files))

    return "".join(out)


def encode_manifest(document: str) -> bytes:
    # Les noms de fichiers non UTF-8 arrivent d'os.walk en "surrogateescape" : on restitue les octets d'origine
    return document.encode('utf-8', errors='surrogateescape')


def write_manifest(document: str, stream: TextIO):
    """Écrit le manifeste sur un flux texte (ex: sys.stdout pour --dry-run)."""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        stream.flush()
        buffer.write(encode_manifest(document))
        buffer.flush()
        return
    stream.write(encode_manifest(document).decode('utf-8', errors='replace'))
    stream.flush()


def open_manifest_for_writing(output_path: Path) -> BinaryIO:
    try:
        return open(output_path, 'wb')
    except OSError as e:
        raise OutputError(f"Impossible de créer {output_path}: {e}") from e


def save_manifest(document: str, output_path: Path) -> bool:
    logger.info(f"Sauvegarde manifeste vers: {output_path}")
    output_path = Path(output_path)
    # Encodage avant ouverture : un échec ne doit pas tronquer un manifeste existant
    try:
        data = encode_manifest(document)
    except UnicodeError as e:
        logger.error(f"Manifeste non encodable en UTF-8, {output_path} laissé intact: {e}")
        return False
    try:
        f = open_manifest_for_writing(output_path)
    except OutputError as e:
        logger.error(str(e))
        return False
    try:
        f.write(data)
    except OSError as e:
        logger.critical(f"Erreur critique écriture manifeste vers {output_path}: {e}", exc_info=True)
        return False
    finally:
        f.close()
    logger.info("Manifeste sauvegardé avec succès.")
    return True
