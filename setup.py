import ast
import pathlib

from setuptools import find_packages, setup

INIT_PY = (
    pathlib.Path(__file__).resolve().parent.joinpath("src", "sudokulib", "__init__.py")
)


def read_version():
    with INIT_PY.open() as f:
        for line in f:
            if line.startswith("__version__ = "):
                return ast.literal_eval(line.split("=", 1)[-1].strip())
    raise RuntimeError("failed to read package version")


# Metadata lives in setup.cfg; only what cannot be expressed there is here.
setup(
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"": ["LICENSE*", "README*"]},
    version=read_version(),
)
