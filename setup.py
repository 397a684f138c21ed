from setuptools import find_packages, setup

# Basic metadata
VERSION = "0.1.0"

setup(
    name="lodestone",
    version=VERSION,
    description="Filesystem-safe, non-colliding names for Minecraft instances and mods",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
        "pydantic>=2",
        "pydantic-settings>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "lodestone=lodestone.cli.main:app",
        ],
    },
)
