"""
Setup script for the wordle-server package.

Installs the ``wordle_server`` package from src/ together with the
``wordle-server`` and ``wordle-client`` console scripts.
"""

from setuptools import setup, find_packages

setup(
    name="wordle-server",
    version="1.0.0",
    description="Multiplayer Wordle game server over a line-oriented TCP protocol",
    author="Course Staff",
    license="Proprietary",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "wordle-server=wordle_server.cli:main",
            "wordle-client=wordle_server.client:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
