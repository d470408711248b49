# code/fxmanifest/config_loader.py
from pathlib import Path
import logging
from typing import Dict, Any, Optional
import yaml

from . import global_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "fx_version": "cerulean",
    "game": "gta5",
    "author": "Auto-Generated",
    "version": "1.0.0",
    "manifest_filename": "fxmanifest.lua",
    "legacy_manifest_filenames": ["__resource.lua"],
}

_config_cache: Optional[Dict[str, Any]] = None


def _normalize(config: Dict[str, Any]) -> Dict[str, Any]:
    # YAML peut lire "1.0.0" comme str mais "1.0" comme float : tout repasser en str
    for key in ("fx_version", "game", "author", "version", "manifest_filename"):
        config[key] = str(config[key])
    legacy = config.get("legacy_manifest_filenames") or []
    if isinstance(legacy, str):
        legacy = [legacy]
    config["legacy_manifest_filenames"] = [str(name) for name in legacy]
    return config


def get_manifest_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Charge et retourne la configuration du manifeste, avec mise en cache."""
    global _config_cache
    if config_path is None and _config_cache is not None:
        return _config_cache

    path = Path(config_path) if config_path else global_config.get_config_file_path()
    config = dict(DEFAULT_CONFIG)

    if not path.is_file():
        logger.warning(
            f"Fichier de configuration YAML introuvable à '{path}'. "
            f"Utilisation de la configuration par défaut."
        )
    else:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_from_file = yaml.safe_load(f)
            if isinstance(config_from_file, dict):
                config.update({k: v for k, v in config_from_file.items() if v is not None})
                logger.info(f"Configuration du manifeste chargée depuis '{path}'.")
            else:
                logger.error(
                    f"Le contenu du fichier YAML '{path}' n'est pas un dictionnaire valide. "
                    "Utilisation de la configuration par défaut."
                )
        except yaml.YAMLError as e_yaml:
            logger.error(
                f"Erreur lors du parsing YAML de la configuration depuis '{path}': {e_yaml}. "
                f"Utilisation de la configuration par défaut.", exc_info=True
            )
        except OSError as e:
            logger.error(
                f"Impossible de lire la configuration '{path}': {e}. "
                f"Utilisation de la configuration par défaut."
            )

    config = _normalize(config)
    logger.debug(f"Configuration effective du manifeste: {config}")
    if config_path is None:
        _config_cache = config
    return config


def reserved_manifest_names(config: Dict[str, Any]) -> frozenset:
    """Noms (en minuscules) des fichiers traités comme des manifestes existants."""
    names = [config["manifest_filename"], *config["legacy_manifest_filenames"]]
    return frozenset(name.lower() for name in names)


def reset_config_cache():
    global _config_cache
    _config_cache = None
