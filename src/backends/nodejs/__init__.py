"""Node.js backend driven by Yarn (v1) and the public npm registry."""

from constants import Constants
from backends.api import LanguageBackend, Quirks
from backends.nodejs import commands, registry_client
from backends.nodejs.guessing import guess
from backends.nodejs.lockfile_parser import list_lockfile
from backends.nodejs.specfile import list_specfile

NODEJS_YARN_BACKEND = LanguageBackend(
    name="nodejs-yarn",
    specfile=Constants.PACKAGE_JSON_FILE,
    lockfile=Constants.YARN_LOCK_FILE,
    filename_patterns=list(Constants.NODEJS_FILENAME_PATTERNS),
    quirks=Quirks.ADD_REMOVE_ALSO_INSTALLS | Quirks.LOCK_ALSO_INSTALLS,
    search=registry_client.search,
    info=registry_client.info,
    add=commands.add,
    remove=commands.remove,
    lock=commands.lock,
    install=commands.install,
    list_specfile=list_specfile,
    list_lockfile=list_lockfile,
    guess=guess,
)

__all__ = ["NODEJS_YARN_BACKEND"]
