# code/fxmanifest/dependencies.py
from typing import Iterable, Optional, Set

DEPENDENCY_KEYWORD = "dependency"
QUOTE = "'"


def extract_dependency(line: str) -> Optional[str]:
    """
    Extrait le nom entre la première et la dernière apostrophe d'une ligne
    contenant 'dependency'. Le nom est retourné en minuscules.
    Retourne None si la ligne ne déclare rien d'exploitable.
    """
    lower_line = line.lower()
    if DEPENDENCY_KEYWORD not in lower_line:
        return None
    start = lower_line.find(QUOTE)
    end = lower_line.rfind(QUOTE)
    if start == -1 or end <= start:
        return None
    return lower_line[start + 1:end]


def extract_dependencies(lines: Iterable[str]) -> Set[str]:
    found: Set[str] = set()
    for line in lines:
        name = extract_dependency(line)
        if name is not None:
            found.add(name)
    return found
