# code/fxmanifest/lib/utils.py

import sys
from pathlib import Path
from typing import List, Optional, Union
import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)-8s - [%(name)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Handlers posés par un appel précédent ; seuls ceux-ci sont remplacés
_installed_handlers: List[logging.Handler] = []


def _remove_installed_handlers(root_logger: logging.Logger):
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        try:
            handler.close()
        except OSError as e_close:
            print(f"Avertissement: Échec fermeture handler log: {e_close}", file=sys.stderr)


def setup_logging(debug_mode: bool = False,
                  log_file: Optional[Union[str, Path]] = None):
    """
    Configure le logger racine pour l'outil.

    Console (stderr) : WARNING, ou DEBUG avec --debug, pour ne pas mêler les logs
    au résumé affiché sur stdout. Fichier optionnel : toujours DEBUG.
    Un second appel remplace les handlers du premier sans toucher aux autres.
    """
    root_logger = logging.getLogger()
    _remove_installed_handlers(root_logger)
    root_logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug_mode else logging.WARNING)
    console_handler.setFormatter(formatter)
    _installed_handlers.append(console_handler)

    if log_file:
        try:
            log_path = Path(log_file).resolve()
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8',
                                               errors='backslashreplace')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            _installed_handlers.append(file_handler)
        except OSError as e:
            print(f"ERREUR: Impossible configurer logging fichier vers {log_file}: {e}",
                  file=sys.stderr)

    for handler in _installed_handlers:
        root_logger.addHandler(handler)
    logger.info(
        f"Logging configuré. Console >= {logging.getLevelName(console_handler.level)}, "
        f"Fichier >= {'DEBUG' if len(_installed_handlers) > 1 else 'Non activé'}"
    )


def print_stage_header(title: str):
    width = len(title) + 6
    logger.info("=" * width)
    logger.info(f"== {title.upper()} ==")
    logger.info("=" * width)
