# code/fxmanifest/classifier.py
"""
Classification d'un chemin relatif de ressource.

Les scripts .lua sont rangés par marqueur dans le chemin (client, serveur,
partagé), les pages .html sont des ui_page, les autres extensions connues
sont des fichiers annexes. Tout le reste est ignoré.
"""
from typing import Callable, List, Tuple

CLIENT_SCRIPT = "client_script"
SERVER_SCRIPT = "server_script"
SHARED_SCRIPT = "shared_script"
UI_PAGE = "ui_page"
ASSET = "asset"
IGNORE = "ignore"

SCRIPT_CATEGORIES = (CLIENT_SCRIPT, SERVER_SCRIPT, SHARED_SCRIPT)

SCRIPT_EXTENSION = ".lua"
MARKUP_EXTENSION = ".html"
ASSET_EXTENSIONS = (
    ".js", ".css",
    ".png", ".jpg", ".jpeg", ".gif", ".svg",
    ".ttf", ".woff", ".woff2", ".otf", ".eot",
    ".json",
    ".ogg", ".mp3", ".wav",
)


def _has_marker(*markers: str) -> Callable[[str], bool]:
    return lambda lower_path: any(marker in lower_path for marker in markers)


# Premier prédicat satisfait gagne ; sinon SHARED_SCRIPT.
SCRIPT_RULES: List[Tuple[Callable[[str], bool], str]] = [
    (_has_marker("client", "cl_"), CLIENT_SCRIPT),
    (_has_marker("server", "sv_"), SERVER_SCRIPT),
    (_has_marker("shared", "sh_"), SHARED_SCRIPT),
]
DEFAULT_SCRIPT_CATEGORY = SHARED_SCRIPT


def classify_script(lower_path: str) -> str:
    for predicate, category in SCRIPT_RULES:
        if predicate(lower_path):
            return category
    return DEFAULT_SCRIPT_CATEGORY


def classify(relative_path: str) -> str:
    """
    Retourne la catégorie d'un chemin relatif.

    La comparaison se fait sur le chemin en minuscules ; les marqueurs sont
    cherchés dans tout le chemin (dossiers compris), donc 'client/main.lua'
    et 'cl_main.lua' sont tous deux des scripts client.
    """
    lower_path = relative_path.lower()
    if lower_path.endswith(SCRIPT_EXTENSION):
        return classify_script(lower_path)
    if lower_path.endswith(MARKUP_EXTENSION):
        return UI_PAGE
    if lower_path.endswith(ASSET_EXTENSIONS):
        return ASSET
    return IGNORE


def is_script(category: str) -> bool:
    return category in SCRIPT_CATEGORIES
