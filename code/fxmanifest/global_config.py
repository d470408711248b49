# code/fxmanifest/global_config.py
# Configuration Globale de l'outil
import os
from pathlib import Path
from dotenv import load_dotenv

# --- Chemins Essentiels ---
PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_CONFIG_FILE_PATH = PACKAGE_DIR / "config.yaml"

# --- Chargement du fichier .env (Fallback) ---
# Cherche un fichier .env dans le répertoire courant.
# override=False : les variables déjà présentes dans l'environnement restent prioritaires.
DOTENV_PATH = Path.cwd() / ".env"
dotenv_loaded = load_dotenv(dotenv_path=DOTENV_PATH, override=False)

# --- Logging ---
# Fichier de log par défaut si --log-file n'est pas fourni (vide = pas de fichier)
DEFAULT_LOG_FILE = os.getenv("FXMANIFEST_LOG_FILE") or None


def get_config_file_path() -> Path:
    """
    Retourne le chemin du config.yaml effectif.
    FXMANIFEST_CONFIG (env ou .env) permet de pointer vers un autre fichier, ex: en-têtes propres à un serveur.
    """
    override = os.getenv("FXMANIFEST_CONFIG")
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_FILE_PATH
