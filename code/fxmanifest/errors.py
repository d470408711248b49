# code/fxmanifest/errors.py
"""Exceptions levées par le générateur de manifeste."""


class FxManifestError(Exception):
    """Erreur de base de l'outil."""


class ConfigurationError(FxManifestError):
    """Le répertoire cible est absent, vide ou n'est pas un répertoire."""


class OutputError(FxManifestError):
    """Le fichier manifeste ne peut pas être créé ou ouvert en écriture."""
