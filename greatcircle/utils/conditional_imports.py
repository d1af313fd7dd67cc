"""
Intercepts import errors concerning optional imports to either:
    - Provide a more detailed error response or
    - Auto-download the specified package
"""

__all__ = ['ConditionalPackageInterceptor']

from importlib import util
import subprocess
import sys
from typing import Union

from greatcircle.utils.logging import LOGGER


class ConditionalPackageInterceptor:
    """
    Explains (or, if permitted, pip installs) optional packages that are not
    installed. Only packages registered with .permit_packages() are handled;
    anything else gets the usual ModuleNotFoundError.

    To use, in the package's root __init__.py:

        ConditionalPackageInterceptor.permit_packages(
            <list or dict of packages>
        )
        sys.meta_path.append(ConditionalPackageInterceptor)

    Being appended to sys.meta_path means this finder is only consulted after
    every regular finder has failed to locate the module.
    """

    PERMITTED_PACKAGES: dict = {}
    AUTO_DOWNLOAD = False

    @classmethod
    def permit_packages(cls, packages: Union[list, dict]) -> None:
        """
        Registers optional packages.

        Import names and pip requirement strings often differ, so packages
        may be given in two ways:

            As a list: packages will be pip installed exactly as listed
                ["flask"]
                "import flask" -> pip install flask

            As a dict: packages will be pip installed by the corresponding value
                {"flask": "greatcircle[web]"}
                "import flask" -> pip install greatcircle[web]

        Args:
            packages (Union[list, dict]): The packages to register

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def permit_auto_download(cls, option: bool) -> None:
        """
        Defines whether packages may be auto-downloaded or not. Default False.
        """
        cls.AUTO_DOWNLOAD = option

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        Called by importlib once all other finders have failed to locate a module.

        Args:
            name (str): The name of the package
            path:
            target:

        Returns:
            The module spec after a successful auto-install, else None
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        requirement = cls.PERMITTED_PACKAGES[name]
        if cls.AUTO_DOWNLOAD:
            LOGGER.warning("Module %r not installed. Attempting to pip install %s...", name, requirement)
            try:
                subprocess.run(
                    [sys.executable, '-m', 'pip', 'install', requirement],
                    check=True
                )
            except subprocess.CalledProcessError:
                return None

            return util.find_spec(name)

        raise ModuleNotFoundError(
            f"You are attempting to use a module which requires an optional installation ({name}). "
            "Please choose one of the following options to continue: \n\n "
            "1) Enable package auto-installation using: \n"
            "    from greatcircle.utils.conditional_imports import ConditionalPackageInterceptor \n"
            "    ConditionalPackageInterceptor.permit_auto_download(True) \n\n"
            "2) Pip install the package yourself using the following command: \n"
            f"    pip install {requirement}"
        )
