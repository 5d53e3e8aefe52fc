from pathlib import Path

from setuptools import find_packages, setup


def read_version():
    init_file = Path(__file__).parent / "human_utils" / "__init__.py"
    for line in init_file.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip('"')
    raise RuntimeError("Unable to find __version__")


COMMANDS = ["new", "mov", "ren", "del", "rem", "nam", "cop"]

setup(
    name="human-utils",
    version=read_version(),
    description="Human-friendly file utilities: new, mov, del, nam and cop",
    license="Apache-2.0",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer>=0.9.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [f"{cmd} = human_utils.cli.main:{cmd}_main" for cmd in COMMANDS],
    },
)
