"""Setup script for the schemacheck package."""

import os
import re

from setuptools import find_packages, setup  # type: ignore


def get_version():
    """Get the version of the package."""
    init_path = os.path.join("schemacheck", "__init__.py")
    with open(init_path) as f:
        content = f.read()
        match = re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]', content)
        if match:
            return match.group(1)
        raise RuntimeError("Unable to find version string.")


setup(
    name="schemacheck",
    version=get_version(),
    packages=find_packages(include=["schemacheck", "schemacheck.*"]),
    package_dir={"": "."},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "Click",
        "python-dotenv",
        "python-hcl2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "schemacheck=schemacheck.cli.cli:cli",
        ],
    },
)
