"""
Copyright (C) 2026 Adobe
"""

from __future__ import print_function

import importlib.machinery
import os
import subprocess
import sys
import types

from setuptools import setup, find_packages


BASE_VERSION = "1.0"

SOURCE_DIR = os.path.dirname(os.path.abspath(__file__))
BUILDNUMBER_DIR = os.path.join(SOURCE_DIR, "buildnumber")
VERSION_FILE = os.path.join(BUILDNUMBER_DIR, "version.py")

THIS_DIR = os.path.dirname(__file__)


def read_requirements(filename):
    """
    :param filename:
    """
    requires = []
    try:
        with open(os.path.join(THIS_DIR, filename)) as robj:
            lnr = 0
            for line in robj.readlines():
                lnr += 1
                _line = line.strip()
                if not _line:
                    continue
                if _line.startswith("#"):
                    continue

                if _line[0].isalpha():
                    requires.append(_line)
                else:
                    print(
                        'ERROR: {}:{}:"{}" does not appear to be a requirement'.format(
                            filename, lnr, _line
                        ),
                        file=sys.stderr,
                    )

    except IOError as err:
        sys.stderr.write('Failure reading "{0}": {1}\n'.format(filename, err))
        sys.exit(err.errno)

    return requires


REQUIRES = read_requirements("requirements.txt")
TEST_REQUIRES = read_requirements("test_requirements.txt")


def get_version():
    """
    Call out to the git command line to get the current commit "number".
    """
    if os.path.exists(VERSION_FILE):
        # Read version from file
        loader = importlib.machinery.SourceFileLoader(
            "buildnumber_version", VERSION_FILE
        )
        version_mod = types.ModuleType(loader.name)
        loader.exec_module(version_mod)
        existing_version = version_mod.__version__  # pylint: disable=no-member
        return existing_version

    # Generate the version from the base version and the git commit number, then store it in the file
    try:
        cmd = subprocess.Popen(
            args=[
                "git",
                "rev-list",
                "--count",
                "HEAD",
            ],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf8",
        )
        stdout = cmd.communicate()[0]
        output = stdout.strip()
        if cmd.returncode == 0 and output:
            new_version = "{0}.{1}".format(BASE_VERSION, output)

            # write the version file
            if os.path.exists(BUILDNUMBER_DIR):
                with open(VERSION_FILE, "w", encoding="utf8") as _fobj:
                    _fobj.write("__version__ = '%s'\n" % new_version)
            return new_version
    except Exception as exc:  # pylint: disable=broad-except
        print(f"Could not generate version from git commits: {exc}")
    # If all else fails, use development version
    return f"{BASE_VERSION}.dev0"


with open(os.path.join(os.path.dirname(__file__), "README.rst")) as fobj:
    long_description = fobj.read().strip()

setup(
    name="buildnumber",
    version=get_version(),
    author="Adobe",
    author_email="noreply@adobe.com",
    license="MIT",
    description="Build counter tool generating C, C++ and C# build number sources",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    scripts=[
        "bin/buildnumber",
    ],
    package_data={
        "buildnumber": ["templates/*.j2"],
    },
    python_requires=">=3.8",
    install_requires=REQUIRES,
    extras_require={"test": TEST_REQUIRES},
    test_suite="tests",
)

# Local Variables:
# fill-column: 100
# End:
